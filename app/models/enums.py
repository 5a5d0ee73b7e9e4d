from enum import Enum


class ApplicationType(str, Enum):
    Internship = "Internship"
    WorkFromHome = "Work From Home"


class ApplicationStatus(str, Enum):
    Rejected = "Rejected"
    Shortlisted = "Shortlisted"
    UnderReview = "Under Review"
    # WFH submissions are never scored
    Received = "Received"


class CurrentYear(str, Enum):
    First = "1st"
    Second = "2nd"
    Third = "3rd"
    Final = "Final"
    Passout = "Passout"


class HoursPerDay(str, Enum):
    Low = "2-3"
    Medium = "4-6"
    FullTime = "Full-time"


class WorkMode(str, Enum):
    Remote = "Remote"
    Onsite = "Onsite"
    Hybrid = "Hybrid"
