from __future__ import annotations

import argparse
import sys
from pathlib import Path


def _bootstrap_import_path() -> None:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_bootstrap_import_path()

from skillbloom.data.marketplace import MENTORS, SUCCESS_STORIES  # noqa: E402
from skillbloom.database import Base, SessionLocal, engine  # noqa: E402
from skillbloom.models.mentor import Mentor  # noqa: E402
from skillbloom.models.success_story import SuccessStory  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Seed mentors and success stories into ORM tables.")
    parser.add_argument("--truncate", action="store_true", help="Delete existing rows first")
    args = parser.parse_args(argv)

    Base.metadata.create_all(bind=engine)

    inserted = {"mentors": 0, "success_stories": 0}
    with SessionLocal() as db:
        if args.truncate:
            db.query(Mentor).delete()
            db.query(SuccessStory).delete()
            db.commit()

        for seed in MENTORS:
            if db.query(Mentor).filter(Mentor.name == seed.name).first():
                continue
            db.add(Mentor(**seed.model_dump()))
            inserted["mentors"] += 1

        for seed in SUCCESS_STORIES:
            if db.query(SuccessStory).filter(SuccessStory.title == seed.title).first():
                continue
            db.add(SuccessStory(**seed.model_dump()))
            inserted["success_stories"] += 1

        db.commit()

    print(f"inserted mentors={inserted['mentors']} success_stories={inserted['success_stories']}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
