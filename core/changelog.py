"""
Reference data seeding.

Location: core/changelog.py

Each changelog runs once per database: it is skipped when its collection
already holds documents. Creating the repositories also creates their
indexes.
"""
import logging
from typing import Dict

from core.models.currency_model import CurrencyModel
from core.repositories.currency_repository import CurrencyRepository
from core.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


def seed_currencies() -> int:
    repo = CurrencyRepository()
    if repo.count():
        logger.info("[CHANGELOG] Currencies already seeded")
        return 0
    inserted = repo.create_many(CurrencyModel.get_seed_currencies())
    logger.info("[CHANGELOG] Seeded %d currencies", len(inserted))
    return len(inserted)


def seed_default_categories() -> int:
    # Imported here: core must not depend on finance at import time
    from finance.models.category_model import CategoryModel
    from finance.repositories.category_repository import DefaultCategoryRepository

    repo = DefaultCategoryRepository()
    if repo.count():
        logger.info("[CHANGELOG] Default categories already seeded")
        return 0
    inserted = repo.create_many(CategoryModel.get_default_categories())
    logger.info("[CHANGELOG] Seeded %d default categories", len(inserted))
    return len(inserted)


def ensure_indexes() -> None:
    from finance.repositories import TransactionRepository, UserCategoryRepository

    for repository_class in (UserRepository, UserCategoryRepository, TransactionRepository):
        repository_class()


def run_changelogs() -> Dict[str, int]:
    """
    Creates every index and seeds the reference data.

    Safe to run on every deployment.

    Returns:
        Dict with the number of documents inserted per collection
    """
    ensure_indexes()
    return {
        'currencies': seed_currencies(),
        'default_categories': seed_default_categories(),
    }
