from enum import Enum


class RoleEnum(str, Enum):
    STUDENT = "student"
    TEACHER = "teacher"
    ADMIN = "admin"

class QuestionTypeEnum(str, Enum):
    MULTIPLE_CHOICE = "multiple_choice"
    TRUE_FALSE = "true_false"
    SHORT_ANSWER = "short_answer"

class SessionStatusEnum(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    SUBMITTED = "submitted"
    EXPIRED = "expired"

# Sessions in these states still accept answers until they expire
OPEN_SESSION_STATUSES = (SessionStatusEnum.NOT_STARTED, SessionStatusEnum.IN_PROGRESS)

CHOICE_QUESTION_TYPES = (QuestionTypeEnum.MULTIPLE_CHOICE, QuestionTypeEnum.TRUE_FALSE)

STAFF_ROLES = (RoleEnum.TEACHER, RoleEnum.ADMIN)

# Inclusive lower bounds, checked top-down
GRADE_BREAKPOINTS = (
    (90.0, "A+"),
    (80.0, "A"),
    (70.0, "B+"),
    (60.0, "B"),
    (50.0, "C"),
    (40.0, "D"),
)
FAILING_GRADE = "F"
