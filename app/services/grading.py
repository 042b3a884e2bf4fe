from app.core.constants import GRADE_BREAKPOINTS, FAILING_GRADE


def calculate_percentage(marks_obtained: int, total_marks: int) -> float:
    if total_marks <= 0:
        return 0.0
    return marks_obtained / total_marks * 100


def calculate_grade(percentage: float) -> str:
    for lower_bound, grade in GRADE_BREAKPOINTS:
        if percentage >= lower_bound:
            return grade
    return FAILING_GRADE


def is_passing(marks_obtained: int, passing_marks: int) -> bool:
    # Raw marks, not percentage
    return marks_obtained >= passing_marks
