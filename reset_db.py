#!/usr/bin/env python3
"""
Datenbank-Reset Script für den Helferplaner
WARNUNG: Dieses Script löscht ALLE Daten!

Verwendung:
    python reset_db.py            # fragt nach Bestätigung
    python reset_db.py --yes      # ohne Rückfrage
    python reset_db.py --seed     # danach Demo-Daten anlegen
"""
import argparse
import sys

from app.database import Base, engine, SessionLocal, init_db
from app.services.database_storage import DatabaseStorage
from app.utils.seed_helper import create_demo_data


def reset_database(seed: bool = False) -> None:
    """Löscht alle Tabellen und legt sie neu an"""
    print("Lösche alte Tabellen...")
    init_db()  # registriert alle Models in Base.metadata
    Base.metadata.drop_all(bind=engine)
    print("✓ Alte Tabellen gelöscht")

    print("Erstelle neue Tabellen...")
    init_db()
    print("✓ Neue Tabellen erstellt")

    if seed:
        db = SessionLocal()
        try:
            create_demo_data(DatabaseStorage(db))
        finally:
            db.close()
        print("✓ Demo-Daten angelegt")


def main() -> None:
    parser = argparse.ArgumentParser(description="Setzt die Helferplaner-Datenbank zurück")
    parser.add_argument("--yes", action="store_true", help="Ohne Rückfrage zurücksetzen")
    parser.add_argument("--seed", action="store_true", help="Demo-Daten nach dem Reset anlegen")
    args = parser.parse_args()

    print(f"WARNUNG: Alle Daten in {engine.url} werden gelöscht!")
    if not args.yes:
        response = input("Möchten Sie fortfahren? (ja/nein): ").strip().lower()
        if response not in ['ja', 'yes', 'j', 'y']:
            print("Abgebrochen.")
            sys.exit(0)

    reset_database(seed=args.seed)
    print("Datenbank erfolgreich zurückgesetzt!")


if __name__ == "__main__":
    main()
