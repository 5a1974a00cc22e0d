from sqlalchemy import Column, Float, ForeignKey, String, text
from sqlalchemy.orm import relationship
from studentms.core.cascade import COURSE, ON_DELETE, STUDENT, referenced_column
from studentms.core.database import Base


class Grade(Base):
    """One enrollment of a student in a course, with its two marks."""

    __tablename__ = "grades"

    roll_no = Column(
        String,
        ForeignKey(referenced_column(STUDENT), ondelete=ON_DELETE),
        primary_key=True
    )
    course_code = Column(
        String,
        ForeignKey(referenced_column(COURSE), ondelete=ON_DELETE),
        primary_key=True
    )
    internal_mark = Column(Float, nullable=False, default=0.0, server_default=text("0"))
    final_mark = Column(Float, nullable=False, default=0.0, server_default=text("0"))

    student = relationship("Student", back_populates="grades")
    course = relationship("Course", back_populates="grades")

    def __repr__(self):
        return f"<Grade {self.roll_no}/{self.course_code}>"
