from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from studentms.core.database import Base


class Student(Base):
    __tablename__ = "students"

    roll_no = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    address = Column(String)
    contact = Column(String)

    # Grade rows are removed by the database (ON DELETE CASCADE)
    grades = relationship("Grade", back_populates="student", passive_deletes=True)

    def __repr__(self):
        return f"<Student {self.roll_no}>"
