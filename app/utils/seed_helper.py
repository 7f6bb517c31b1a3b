"""Helper für das Erstellen von Demo-Daten beim ersten Start"""
import logging
from datetime import date

from app.services.storage import Storage
from app.utils.datetime_utils import join_raw_dates, format_event_dates

logger = logging.getLogger(__name__)

DEMO_ADMIN = "Volunteer Admin"

DEMO_EVENTS = [
    {
        "name": "Community Park Cleanup",
        "days": [date(2023, 5, 15)],
        "time": "9:00 AM - 12:00 PM",
        "location": "Riverside Park",
    },
    {
        "name": "Food Drive",
        "days": [date(2023, 5, 20)],
        "time": "10:00 AM - 2:00 PM",
        "location": "Community Center",
    },
    {
        "name": "Charity Run",
        "days": [date(2023, 6, 5)],
        "time": "7:00 AM - 10:00 AM",
        "location": "Downtown Plaza",
    },
]

DEMO_VOLUNTEERS = [
    {
        "name": "Sarah Johnson",
        "email": "sarah.j@example.com",
        "phone": "(555) 123-4567",
        "role": "Clean-up Crew",
        "team": "North Area",
        "shirt_size": "Medium",
        "dietary_needs": "Vegetarian",
        "checked_in": False,
    },
    {
        "name": "Michael Chen",
        "email": "michael.c@example.com",
        "phone": "(555) 234-5678",
        "role": "Team Lead",
        "team": "South Area",
        "shirt_size": "Large",
        "dietary_needs": "None",
        "checked_in": True,
    },
    {
        "name": "Jessica Smith",
        "email": "jessica.s@example.com",
        "phone": "(555) 345-6789",
        "role": "Registration",
        "team": "Central Area",
        "shirt_size": "Small",
        "dietary_needs": "Gluten-free",
        "checked_in": False,
    },
    {
        "name": "David Rodriguez",
        "email": "david.r@example.com",
        "phone": "(555) 456-7890",
        "role": "Food Distribution",
        "team": "Kitchen",
        "shirt_size": "XL",
        "dietary_needs": "None",
        "checked_in": True,
    },
    {
        "name": "Emily Wilson",
        "email": "emily.w@example.com",
        "phone": "(555) 567-8901",
        "role": "First Aid",
        "team": "Medical",
        "shirt_size": "Medium",
        "dietary_needs": "Vegan",
        "checked_in": False,
    },
]


def create_demo_data(storage: Storage) -> bool:
    """
    Erstellt Demo-Daten beim ersten Start der Anwendung.

    Drei Events mit je fünf Helfern, zwei davon bereits eingecheckt.

    Args:
        storage: Ziel-Storage (Speicher oder Datenbank)

    Returns:
        True wenn Daten angelegt wurden, False wenn bereits Events existieren

    Note:
        - Wird nur ausgeführt, solange noch kein Event existiert
        - Aufgerufen in app/main.py im lifespan startup (SEED_DEMO_DATA)
    """
    if not storage.is_empty():
        logger.debug("Events already present, skipping demo data")
        return False

    for event_data in DEMO_EVENTS:
        event = storage.create_event({
            "name": event_data["name"],
            "date": format_event_dates(event_data["days"]),
            "raw_dates": join_raw_dates(event_data["days"]),
            "time": event_data["time"],
            "location": event_data["location"],
        })

        for volunteer_data in DEMO_VOLUNTEERS:
            values = {**volunteer_data, "event_id": event.id}
            if values["checked_in"]:
                values["checked_in_by"] = DEMO_ADMIN
            storage.create_volunteer(values)

    logger.info(f"Demo data created: {len(DEMO_EVENTS)} events with {len(DEMO_VOLUNTEERS)} volunteers each")
    return True
