"""
Service for default and user categories.

Location: finance/services/category_service.py

Default categories are global and read-only. User categories belong to
one user and share a single namespace with the defaults: a name is unique,
case-insensitively, across the defaults plus the user's own categories.
"""
import logging
from typing import Dict, Any, Optional, Iterable

from core.pagination import paginate
from finance.exceptions import CategoryNotFoundException, CategoryValidationException
from finance.models.category_model import CategoryModel
from finance.repositories.category_repository import (
    DefaultCategoryRepository,
    UserCategoryRepository,
)

logger = logging.getLogger(__name__)


def ensure_unique_name(name: str, candidates: Iterable[Dict[str, Any]],
                       exclude_id: Optional[Any] = None) -> None:
    """
    Checks a category name against every category visible to the user.

    Args:
        name: Name being created or renamed to
        candidates: Default and user categories of the user
        exclude_id: Id of the category being renamed (not a collision with itself)

    Raises:
        CategoryValidationException: If another candidate has the same name
    """
    wanted = name.strip().lower()
    for candidate in candidates:
        if exclude_id is not None and candidate['_id'] == exclude_id:
            continue
        if (candidate.get('name') or '').strip().lower() == wanted:
            raise CategoryValidationException.duplicate_name(name)


class CategoryService:
    """
    Example usage:
        service = CategoryService()
        page = service.list_categories(user_id, page=0, size=10, search_term='food')
    """

    def __init__(self):
        self.default_repo = DefaultCategoryRepository()
        self.user_category_repo = UserCategoryRepository()

    def _visible_categories(self, user_id: str):
        return self.default_repo.find_all() + self.user_category_repo.find_active_by_user(user_id)

    @staticmethod
    def _validated_name(name: Optional[str]) -> str:
        name = (name or '').strip()
        if not CategoryModel.is_valid_name(name):
            raise CategoryValidationException.invalid_characters()
        return name

    def list_categories(self, user_id: str, page: int, size: int,
                        search_term: Optional[str] = None) -> Dict[str, Any]:
        """
        Merged list of active default and user categories.

        Args:
            user_id: User id
            page: Zero-based page number
            size: Page size
            search_term: Case-insensitive substring filter on the name (optional)

        Returns:
            Paginated response of CategoryDTOs sorted by name, case-insensitively
        """
        term = search_term.strip() if search_term else None

        merged = [CategoryModel.to_dto(c, is_default=True)
                  for c in self.default_repo.find_active(term)]
        merged += [CategoryModel.to_dto(c, is_default=False)
                   for c in self.user_category_repo.find_active_by_user(user_id, term)]
        merged.sort(key=lambda dto: dto['name'].lower())

        return paginate(merged, page, size)

    def create_category(self, user_id: str, name: str) -> Dict[str, Any]:
        """
        Creates a user category.

        Raises:
            CategoryValidationException: If the name has invalid characters or
                collides with a default category or another category of the user
        """
        name = self._validated_name(name)
        ensure_unique_name(name, self._visible_categories(user_id))

        category = self.user_category_repo.create(
            CategoryModel.create_user_category_data(user_id, name))
        logger.info("[CATEGORY] Created category %s for user %s", category['_id'], user_id)
        return CategoryModel.to_dto(category, is_default=False)

    def update_category(self, category_id: str, user_id: str, name: str) -> Dict[str, Any]:
        """
        Renames a user category.

        Raises:
            CategoryNotFoundException: If the category does not exist or is not the user's
            CategoryValidationException: Invalid or duplicate name
        """
        category = self.user_category_repo.find_by_id_and_user(category_id, user_id)
        if not category:
            raise CategoryNotFoundException.by_id(category_id)

        name = self._validated_name(name)
        ensure_unique_name(name, self._visible_categories(user_id), exclude_id=category['_id'])

        self.user_category_repo.rename(category['_id'], name)
        logger.info("[CATEGORY] Renamed category %s for user %s", category_id, user_id)
        return CategoryModel.to_dto(self.user_category_repo.find_by_id(category['_id']), is_default=False)

    def delete_category(self, category_id: str, user_id: str) -> None:
        """
        Deletes a user category permanently.

        Raises:
            CategoryNotFoundException: If the category does not exist or is not the user's
        """
        category = self.user_category_repo.find_by_id_and_user(category_id, user_id)
        if not category:
            raise CategoryNotFoundException.by_id(category_id)

        self.user_category_repo.delete(category['_id'])
        logger.info("[CATEGORY] Deleted category %s for user %s", category_id, user_id)
