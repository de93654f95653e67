"""
Seed app_settings defaults and, optionally, the first factory location.
Existing settings rows and locations are left unchanged. Run from the repo root with .env loaded.

Usage:
  python scripts/seed_settings.py                    # settings keys only
  python scripts/seed_settings.py 19.0760 72.8777    # also FACTORY_LAT/LNG and a "Main Gate" location
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from app.core.logging import setup_logging
from app.db.init_db import init_db
from app.db.session import SessionLocal


def main():
    setup_logging()
    lat = lng = None
    if len(sys.argv) == 3:
        lat, lng = float(sys.argv[1]), float(sys.argv[2])
    elif len(sys.argv) != 1:
        print(__doc__)
        sys.exit(2)

    db = SessionLocal()
    try:
        init_db(db, factory_lat=lat, factory_lng=lng)
        print("Settings seeded.")
    finally:
        db.close()


if __name__ == "__main__":
    main()
