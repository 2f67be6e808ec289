# server/gunicorn_config.py
"""Gunicorn settings: gunicorn -c gunicorn_config.py main:app"""
import multiprocessing
import os

bind = f"{os.getenv('APP_HOST', '0.0.0.0')}:{os.getenv('APP_PORT', '8000')}"
workers = int(os.getenv("WEB_CONCURRENCY", max(1, multiprocessing.cpu_count() // 2)))
worker_class = "uvicorn.workers.UvicornWorker"
max_requests = 1000
max_requests_jitter = 100

accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()

timeout = 60
graceful_timeout = 30

proc_name = "staff-manager"

raw_env = [
    "PYTHONUNBUFFERED=1",
]
