from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from studentms.core.database import Base


class Course(Base):
    __tablename__ = "courses"

    code = Column(String, primary_key=True)
    title = Column(String, nullable=False)
    description = Column(String)
    teacher = Column(String)

    grades = relationship("Grade", back_populates="course", passive_deletes=True)

    def __repr__(self):
        return f"<Course {self.code}>"
