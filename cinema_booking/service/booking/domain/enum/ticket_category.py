from enum import StrEnum


class TicketCategory(StrEnum):
    ADULT = 'adult'
    SENIOR = 'senior'
    CHILD = 'child'
    STUDENT = 'student'
