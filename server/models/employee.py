from sqlalchemy import Column, Integer, String, Text, Date, ForeignKey, Index
from sqlalchemy.orm import relationship
from .base import Base


class Employee(Base):
    """Employee entity - belongs to exactly one company."""
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(50), nullable=False)
    # No length rule on middle names
    middle_name = Column(Text, nullable=True)
    last_name = Column(String(50), nullable=False)
    # Position member name, e.g. "DEVELOPER"
    position = Column(String(50), nullable=False)
    hire_date = Column(Date, nullable=False)
    company_id = Column(
        Integer,
        ForeignKey("companies.id", ondelete="RESTRICT"),
        nullable=False
    )

    # Relationships
    company = relationship("Company", back_populates="employees")

    __table_args__ = (
        Index("idx_employees_company", "company_id"),
        Index("idx_employees_last_name", "last_name"),
    )

    def __repr__(self):
        return f"<Employee {self.last_name} {self.first_name}>"
