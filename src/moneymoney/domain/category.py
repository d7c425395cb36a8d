"""Category domain service."""

from typing import Iterable

from moneymoney.bridge.commands import Operation
from moneymoney.bridge.mappers import build_category_tree, categories_to_domain
from moneymoney.domain.entities import Category, CategoryNode
from moneymoney.domain.service import Service


class CategoryService(Service):
    """Service for reading categories and budgets."""

    def export_categories(self) -> list[Category]:
        """Export all categories with their budgets.

        Returns:
            Categories in MoneyMoney's order with parent links resolved

        Raises:
            CyclicHierarchyError: If parent links form a cycle
        """
        return self._export(Operation.EXPORT_CATEGORIES, None, categories_to_domain, [])

    def category_tree(self) -> list[CategoryNode]:
        """Export categories and return the root nodes of the tree."""
        return build_category_tree(self.export_categories())

    @staticmethod
    def format_category_path(categories: Iterable[Category], uuid: str) -> str:
        """Get full path for a category.

        Args:
            categories: Categories from a previous export
            uuid: Category UUID

        Returns:
            Full category path (e.g., "Food & Dining\\Groceries"), using the
            backslash separator MoneyMoney accepts for nested categories, or
            "" if the UUID is unknown
        """
        by_uuid = {category.uuid: category for category in categories}
        path_parts = []
        seen = set()
        current = by_uuid.get(uuid)

        while current is not None and current.uuid not in seen:
            seen.add(current.uuid)
            path_parts.append(current.name)
            current = by_uuid.get(current.parent_uuid) if current.parent_uuid else None

        return "\\".join(reversed(path_parts))
