# app/core/constants.py

# ==========================================================
# PLACEHOLDER (written for every optional field left blank)
# ==========================================================
PLACEHOLDER = "-"

# ==========================================================
# FORM CATALOGS (Must match the checkbox values in the forms)
# ==========================================================
TECHNOLOGIES = [
    "Web Development",
    "Frontend (HTML, CSS, JS, React)",
    "Backend (PHP / Node.js)",
    "Full Stack",
    "Cyber Security",
    "Data Analytics",
    "AI / ML",
    "Cloud / DevOps",
]

PROGRAMMING_LANGUAGES = [
    "HTML/CSS",
    "JavaScript",
    "TypeScript",
    "Python",
    "Java",
    "PHP",
    "C++",
    "C#",
    "Go",
    "Rust",
]

DEGREES = ["BCA", "MCA", "B.Tech", "M.Tech", "Diploma", "Other"]

REFERENCE_SOURCES = ["linkedin", "instagram", "facebook", "friend", "website", "other"]

# ==========================================================
# SHEET NAMES (tabs inside the spreadsheet)
# ==========================================================
MASTER_SHEET = "All_Applications"
REJECTED_SHEET = "Rejected"
WFH_SHEET = "WFH_Applications"

TECH_SHEET_MAP = {
    "Web Development": "Web_Development",
    "Frontend (HTML, CSS, JS, React)": "Frontend",
    "Backend (PHP / Node.js)": "Backend",
    "Full Stack": "Full_Stack",
    "Cyber Security": "Cyber_Security",
    "Data Analytics": "Data_Analytics",
    "AI / ML": "AI_ML",
    "Cloud / DevOps": "Cloud_DevOps",
}

# ==========================================================
# SCORING
# ==========================================================
SHORTLIST_THRESHOLD = 60

# ==========================================================
# HEADER ROWS
# ==========================================================
MASTER_HEADERS = [
    "Timestamp",
    "Type",
    "Full Name",
    "Email",
    "Mobile",
    "City",
    "State",
    "College/Location",
    "Year/Education",
    "Degree",
    "Specialization",
    "CGPA/Percentage",
    "Passing Year",
    "Technologies",
    "Programming Languages",
    "Frameworks",
    "Database",
    "GitHub/Portfolio",
    "Has Projects",
    "Has Internship",
    "Experience Duration",
    "Mode",
    "Hours Per Day",
    "Duration",
    "Why Select You",
    "Ready To Learn",
    "Father's Name",
    "Father's Occupation",
    "Native Place",
    "Vehicle",
    "Score",
    "Status",
]

WFH_HEADERS = [
    "Timestamp",
    "Type",
    "Full Name",
    "Email",
    "Mobile",
    "City",
    "State",
    "College",
    "Degree",
    "Father's Name",
    "Father's Occupation",
    "Native Place",
    "Vehicle",
    "Reference Source",
]
