# jobs.py
from sqlalchemy import CheckConstraint, Column, Float, ForeignKey, Integer, String
from jobly.database import Base


class Job(Base):
    __tablename__ = "jobs"
    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_jobs_salary"),
        CheckConstraint("equity <= 1.0", name="ck_jobs_equity"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), index=True, nullable=False)
    salary = Column(Integer, nullable=True)
    equity = Column(Float, nullable=True)
    company_handle = Column(String(25), ForeignKey("companies.handle", ondelete="CASCADE"), nullable=False)
