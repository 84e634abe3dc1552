import logging
from app.core.config import settings
from app.database import SessionLocal
from app.models.maturity import Level
from app.services.levels import MaturityLevel

logger = logging.getLogger(__name__)

def init_system_data():
    """
    Seeds the default maturity levels when the levels table is empty.
    """
    if not settings.seed_reference_data:
        return
    db = SessionLocal()
    try:
        level_count = db.query(Level).count()
        if level_count == 0:
            logger.info("Running startup initialization...")
            for order, level in enumerate(MaturityLevel):
                db.add(Level(name=level.value, display_order=order))
            db.commit()
            logger.info(f"✓ Seeded {len(MaturityLevel)} default maturity levels.")
        else:
            logger.info(f"System initialization check: {level_count} level(s) found.")

    except Exception as e:
        db.rollback()
        logger.error(f"Error during system initialization check: {str(e)}", exc_info=True)
    finally:
        db.close()
