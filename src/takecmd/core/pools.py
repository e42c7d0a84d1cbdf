"""Built-in value pools for people and places.

These pools back the parts of a briefing that are not meant to be edited
per exercise (names, job titles, street addresses). The exercise-specific
pools (disaster types, skills, resource items) live in the settings document.
"""

from typing import Dict, Tuple

from takecmd.core.entities import Gender


FIRST_NAMES: Dict[Gender, Tuple[str, ...]] = {
    Gender.MALE: (
        "James", "John", "Robert", "Michael", "William", "David", "Richard",
        "Joseph", "Thomas", "Charles", "Daniel", "Matthew", "Anthony", "Mark",
        "Donald", "Steven", "Paul", "Andrew", "Joshua", "Kenneth", "Kevin",
        "Brian", "George", "Timothy", "Ronald", "Edward", "Jason", "Jeffrey",
        "Ryan", "Jacob", "Gary", "Nicholas", "Eric", "Jonathan", "Stephen",
        "Larry", "Justin", "Scott", "Brandon", "Benjamin", "Samuel", "Gregory",
        "Frank", "Alexander", "Raymond", "Patrick", "Jack", "Dennis", "Jerry",
        "Tyler", "Aaron", "Jose", "Adam", "Nathan", "Henry", "Douglas",
        "Zachary", "Peter", "Kyle", "Walter", "Ethan", "Jeremy", "Harold",
        "Keith", "Christian", "Roger", "Noah", "Gerald", "Carl", "Terry",
        "Sean", "Austin", "Arthur", "Lawrence", "Jesse", "Dylan", "Bryan",
        "Joe", "Jordan", "Billy", "Bruce", "Albert", "Willie", "Gabriel",
    ),
    Gender.FEMALE: (
        "Mary", "Patricia", "Jennifer", "Linda", "Elizabeth", "Barbara",
        "Susan", "Jessica", "Sarah", "Karen", "Lisa", "Nancy", "Betty",
        "Margaret", "Sandra", "Ashley", "Kimberly", "Emily", "Donna",
        "Michelle", "Carol", "Amanda", "Dorothy", "Melissa", "Deborah",
        "Stephanie", "Rebecca", "Sharon", "Laura", "Cynthia", "Kathleen",
        "Amy", "Angela", "Shirley", "Anna", "Brenda", "Pamela", "Emma",
        "Nicole", "Helen", "Samantha", "Katherine", "Christine", "Debra",
        "Rachel", "Carolyn", "Janet", "Catherine", "Maria", "Heather",
        "Diane", "Ruth", "Julie", "Olivia", "Joyce", "Virginia", "Victoria",
        "Kelly", "Lauren", "Christina", "Joan", "Evelyn", "Judith", "Megan",
        "Andrea", "Cheryl", "Hannah", "Jacqueline", "Martha", "Gloria",
        "Teresa", "Ann", "Sara", "Madison", "Frances", "Kathryn", "Janice",
        "Jean", "Abigail", "Alice", "Judy", "Sophia", "Grace", "Denise",
    ),
}

LAST_NAMES: Tuple[str, ...] = (
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller",
    "Davis", "Rodriguez", "Martinez", "Hernandez", "Lopez", "Gonzalez",
    "Wilson", "Anderson", "Thomas", "Taylor", "Moore", "Jackson", "Martin",
    "Lee", "Perez", "Thompson", "White", "Harris", "Sanchez", "Clark",
    "Ramirez", "Lewis", "Robinson", "Walker", "Young", "Allen", "King",
    "Wright", "Scott", "Torres", "Nguyen", "Hill", "Flores", "Green",
    "Adams", "Nelson", "Baker", "Hall", "Rivera", "Campbell", "Mitchell",
    "Carter", "Roberts", "Gomez", "Phillips", "Evans", "Turner", "Diaz",
    "Parker", "Cruz", "Edwards", "Collins", "Reyes", "Stewart", "Morris",
    "Morales", "Murphy", "Cook", "Rogers", "Gutierrez", "Ortiz", "Morgan",
    "Cooper", "Peterson", "Bailey", "Reed", "Kelly", "Howard", "Ramos",
    "Kim", "Cox", "Ward", "Richardson", "Watson", "Brooks", "Chavez",
)

# Occupation is "<area> <role>", e.g. "Marketing Coordinator"
JOB_AREAS: Tuple[str, ...] = (
    "Solutions", "Program", "Brand", "Security", "Research", "Marketing",
    "Directives", "Implementation", "Integration", "Functionality",
    "Response", "Paradigm", "Tactics", "Identity", "Markets", "Group",
    "Division", "Applications", "Optimization", "Operations",
    "Infrastructure", "Intranet", "Communications", "Web", "Branding",
    "Quality", "Assurance", "Mobility", "Accounts", "Data", "Creative",
    "Configuration", "Accountability", "Interactions", "Factors",
    "Usability", "Metrics",
)

JOB_TYPES: Tuple[str, ...] = (
    "Supervisor", "Associate", "Executive", "Liaison", "Officer", "Manager",
    "Engineer", "Specialist", "Director", "Coordinator", "Administrator",
    "Architect", "Analyst", "Designer", "Planner", "Orchestrator",
    "Technician", "Developer", "Producer", "Consultant", "Assistant",
    "Facilitator", "Agent", "Representative", "Strategist",
)

STREET_NAMES: Tuple[str, ...] = (
    "Main", "Oak", "Pine", "Maple", "Cedar", "Elm", "Washington", "Lake",
    "Hill", "Park", "Walnut", "Sunset", "Lincoln", "Jackson", "Church",
    "River", "Willow", "Highland", "Meadow", "Forest", "Jefferson",
    "Madison", "Spring", "Ridge", "Chestnut", "Franklin", "Center",
    "Mill", "Valley", "Dogwood", "Birch", "Adams", "Hickory", "Prospect",
    "Railroad", "Magnolia", "Cherry", "Poplar", "Sycamore", "Lakeview",
)

STREET_SUFFIXES: Tuple[str, ...] = (
    "St", "Ave", "Rd", "Blvd", "Ln", "Dr", "Ct", "Pl", "Way", "Pkwy",
    "Cir", "Ter", "Trl", "Hwy", "Sq",
)

# Adult age range, inclusive
ADULT_AGE_RANGE: Tuple[int, int] = (18, 65)

# House numbers run from one to five digits
HOUSE_NUMBER_RANGE: Tuple[int, int] = (1, 99999)
