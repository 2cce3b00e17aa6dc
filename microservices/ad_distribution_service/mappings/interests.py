"""
Interest Mappings

Maps free-form interest tags to each platform's interest taxonomy ids.
Unknown interests are dropped by the targeting builders.
"""

from typing import Dict, List, Union

from ..models import Platform

FACEBOOK_INTERESTS: Dict[str, str] = {
    "Technology": "6003020834693",
    "Computers": "6003020834493",
    "Mobile devices": "6003348662891",
    "Software": "6003462882570",
    "Consumer electronics": "6002991069090",
    "Business": "6003348662692",
    "Entrepreneurship": "6003291330804",
    "Small business": "6003353709227",
    "Marketing": "6003139266461",
    "Advertising": "6003127297061",
    "Sports": "6003138928398",
    "Running": "6003020834893",
    "Yoga": "6003195050025",
    "Music": "6003020834593",
    "Television": "6003442462270",
    "Gaming": "6003354699376",
    "Food": "6003020834393",
    "Restaurants": "6003348662792",
    "Cooking": "6003020834793",
    "Coffee": "6003348662892",
    "Travel": "6003348662993",
    "Hotels": "6003348663193",
    "Fashion": "6003349076252",
    "Beauty": "6003020834193",
    "Gardening": "6003020834093",
    "Interior design": "6003020833993",
    "Real estate": "6003348662592",
    "Shopping": "6003348662392",
    "Online shopping": "6003348662492",
}

# Affinity audience ids
GOOGLE_INTERESTS: Dict[str, str] = {
    "Technology": "30000",
    "Computers": "30001",
    "Mobile devices": "30002",
    "Software": "30003",
    "Consumer electronics": "30004",
    "Business": "20000",
    "Entrepreneurship": "20001",
    "Small business": "20002",
    "Marketing": "20003",
    "Advertising": "20004",
    "Sports": "10000",
    "Fitness and wellness": "10001",
    "Running": "10002",
    "Yoga": "10003",
    "Music": "40001",
    "Gaming": "40003",
    "Food": "50000",
    "Restaurants": "50001",
    "Cooking": "50002",
    "Coffee": "50003",
    "Travel": "60000",
    "Hotels": "60002",
}

LINKEDIN_INTERESTS: Dict[str, str] = {
    "Business": "urn:li:interest:1",
    "Entrepreneurship": "urn:li:interest:2",
    "Marketing": "urn:li:interest:3",
    "Technology": "urn:li:interest:4",
    "Software": "urn:li:interest:5",
    "Leadership": "urn:li:interest:6",
    "Management": "urn:li:interest:7",
    "Sales": "urn:li:interest:8",
    "Finance": "urn:li:interest:9",
    "Human resources": "urn:li:interest:10",
}

TIKTOK_INTERESTS: Dict[str, int] = {
    "Entertainment": 100001,
    "Music": 100002,
    "Gaming": 100003,
    "Sports": 100004,
    "Food": 100005,
    "Travel": 100006,
    "Fashion": 100007,
    "Beauty": 100008,
    "Technology": 200001,
    "Mobile devices": 200002,
    "Consumer electronics": 200003,
    "Business": 300001,
    "E-commerce": 300002,
    "Marketing": 300003,
}

INTEREST_MAPPINGS: Dict[Platform, Dict[str, Union[str, int]]] = {
    Platform.FACEBOOK: FACEBOOK_INTERESTS,
    Platform.GOOGLE: GOOGLE_INTERESTS,
    Platform.LINKEDIN: LINKEDIN_INTERESTS,
    Platform.TIKTOK: TIKTOK_INTERESTS,
}


def map_interests(platform: Platform, interests: List[str]) -> List[Union[str, int]]:
    """Platform ids for the known interests, order preserved, duplicates removed"""
    table = INTEREST_MAPPINGS.get(platform, {})
    ids: List[Union[str, int]] = []
    for interest in interests:
        interest_id = table.get(interest)
        if interest_id is not None and interest_id not in ids:
            ids.append(interest_id)
    return ids
