"""
Random value generators and sample value pools for the seeding script.
"""
import math
import random
from datetime import date, datetime
from typing import Optional, Sequence, TypeVar, Union

T = TypeVar("T")

FIRST_NAMES = ["Alice", "Bob", "Charlie", "David", "Eve", "Fiona", "George", "Hannah", "Ian", "Julia",
               "Kevin", "Laura", "Mike", "Nora", "Oscar"]
LAST_NAMES = ["Smith", "Jones", "Williams", "Brown", "Davis", "Miller", "Wilson", "Moore", "Taylor",
              "Anderson", "Thomas", "Jackson", "White", "Harris", "Martin"]
EMAIL_DOMAINS = ["example.com", "mail.com", "test.org", "web.dev", "data.net"]

PRODUCT_NAMES = ["Laptop Pro", "Gaming Mouse", "Mechanical Keyboard", "4K Monitor", "HD Webcam",
                 "Noise-Cancelling Headphones", "1TB SSD", "GeForce RTX 4090", "Intel Core i9",
                 "32GB DDR5 RAM", "Smartphone X", "Tablet Lite"]
MANUFACTURERS = ["AlphaTech", "BetaGadgets", "GammaCorp", "DeltaElec", "EpsilonSys", "ZetaDevices"]
DESCRIPTIONS = [
    "A top-tier product with excellent features.",
    "High performance and reliability for everyday use.",
    "Built with the latest technology.",
    "Durable and user-friendly design.",
    "Ideal for professionals and enthusiasts.",
    "Enhance your productivity and entertainment.",
    "Compact and powerful.",
]

STORE_NAME_PREFIXES = ["Grand", "Central", "Digital", "Urban", "Value", "Peak", "Future"]
STORE_NAME_SUFFIXES = ["Hub", "Emporium", "World", "Zone", "Place", "Retail", "Solutions"]
CATEGORIES = ["Electronics", "Computers", "Gadgets", "Mobile", "Home Appliances", "Tech Accessories"]
CITIES = ["Metro City", "Techville", "Innovate Burg", "Silicon Valley", "Cyber Town", "Gadgetburg"]
STREET_NAMES = ["Main", "Oak", "Pine", "Maple", "Cedar", "Elm", "Washington", "Lake", "Hill", "Park",
                "Innovation", "Technology"]
STREET_SUFFIXES = ["St", "Ave", "Rd", "Blvd", "Ln", "Dr", "Way"]


def random_int(low: float, high: float) -> int:
    """Uniform integer in [ceil(low), floor(high)], both ends inclusive.

    When no integer lies between the bounds the result is ceil(low).
    """
    low, high = math.ceil(low), math.floor(high)
    return random.randint(low, max(low, high))


def random_element(items: Optional[Sequence[T]]) -> Optional[T]:
    """Uniformly chosen element, or None when there is nothing to choose from."""
    if not items:
        return None
    return random.choice(items)


def random_date(start: datetime, end: datetime) -> datetime:
    return start + (end - start) * random.random()


def format_date(value: Union[date, datetime]) -> str:
    return value.strftime("%Y-%m-%d")


def random_phone_number() -> str:
    return f"{random_int(100, 999)}-{random_int(100, 999)}-{random_int(1000, 9999)}"
