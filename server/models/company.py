from sqlalchemy import Column, Integer, String, Index, func
from sqlalchemy.orm import relationship
from .base import Base


class Company(Base):
    """Company entity - employees point at it through employees.company_id."""
    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    legal_form = Column(String(10), nullable=False)

    # Relationships
    employees = relationship("Employee", back_populates="company", passive_deletes="all")

    __table_args__ = (
        # Backstop for the service-level duplicate check
        Index("uq_companies_name_lower", func.lower(name), unique=True),
    )

    def __repr__(self):
        return f"<Company {self.name}>"
