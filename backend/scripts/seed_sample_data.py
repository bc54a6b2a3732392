# backend/scripts/seed_sample_data.py

"""
Script to load the sample dashboard data into an empty database
"""

import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.database import SessionLocal, init_db
from app.sample_data import seed_sample_data
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main():
    """Main function"""
    init_db()
    db = SessionLocal()

    try:
        if seed_sample_data(db):
            logger.info("Sample data seeded successfully!")
    except Exception as e:
        logger.error(f"Error seeding sample data: {str(e)}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
