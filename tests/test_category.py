"""Tests for category hierarchy and the category service."""

import pytest

from moneymoney.bridge.mappers import (
    build_category_tree,
    categories_to_domain,
    check_category_hierarchy,
)
from moneymoney.bridge.nodes import ArrayNode, DictNode, IntegerNode, StringNode
from moneymoney.domain.category import CategoryService
from moneymoney.domain.currency import Currency
from moneymoney.domain.entities import Category
from moneymoney.domain.errors import CyclicHierarchyError, MappingError


def _category(uuid: str, parent_uuid: str | None = None, name: str | None = None) -> Category:
    return Category(
        uuid=uuid,
        name=name or uuid,
        parent_uuid=parent_uuid,
        budget=None,
        currency=Currency.EUR,
    )


def _record(uuid: str, indentation: int = 0, parent_uuid: str | None = None) -> DictNode:
    entries = {
        "uuid": StringNode(uuid),
        "name": StringNode(uuid.title()),
        "currency": StringNode("EUR"),
        "indentation": IntegerNode(indentation),
    }
    if parent_uuid is not None:
        entries["parentUuid"] = StringNode(parent_uuid)
    return DictNode(entries)


def test_forest_passes():
    """Test a valid two-level forest is accepted."""
    check_category_hierarchy(
        [_category("a"), _category("b", "a"), _category("c", "b"), _category("d")]
    )


def test_cycle_of_length_one():
    """Test a category that is its own parent is rejected."""
    with pytest.raises(CyclicHierarchyError) as excinfo:
        check_category_hierarchy([_category("a", "a")])

    assert excinfo.value.uuid == "a"


def test_cycle_of_length_two():
    """Test two categories pointing at each other are rejected."""
    with pytest.raises(CyclicHierarchyError):
        check_category_hierarchy([_category("a", "b"), _category("b", "a")])


def test_cycle_of_length_three():
    """Test a three-category loop is rejected even behind a valid root."""
    categories = [
        _category("root"),
        _category("child", "root"),
        _category("x", "y"),
        _category("y", "z"),
        _category("z", "x"),
    ]

    with pytest.raises(CyclicHierarchyError) as excinfo:
        check_category_hierarchy(categories)

    assert excinfo.value.uuid in {"x", "y", "z"}


def test_branch_into_cycle_is_rejected():
    """Test a chain that leads into a cycle is rejected."""
    with pytest.raises(CyclicHierarchyError):
        check_category_hierarchy(
            [_category("leaf", "a"), _category("a", "b"), _category("b", "a")]
        )


def test_unknown_parent():
    """Test a parent reference to a missing category is a mapping error."""
    with pytest.raises(MappingError, match="unknown parent 'ghost'"):
        check_category_hierarchy([_category("a", "ghost")])


def test_export_with_self_parent_fails():
    """Test a cycle in an exported category list fails the export."""
    node = ArrayNode((_record("a", parent_uuid="a"),))

    with pytest.raises(CyclicHierarchyError):
        categories_to_domain(node)


def test_explicit_parent_overrides_indentation():
    """Test parentUuid wins over the indentation-derived parent."""
    node = ArrayNode(
        (
            _record("food"),
            _record("drinks"),
            _record("coffee", indentation=1, parent_uuid="food"),
        )
    )

    categories = categories_to_domain(node)

    assert categories[2].parent_uuid == "food"


def test_indentation_skipping_levels():
    """Test a deeper entry attaches to the nearest shallower ancestor."""
    node = ArrayNode((_record("a"), _record("b", 1), _record("c", 3), _record("d", 2)))

    parents = {c.uuid: c.parent_uuid for c in categories_to_domain(node)}

    assert parents == {"a": None, "b": "a", "c": "b", "d": "b"}


def test_build_category_tree():
    """Test tree roots and children keep export order."""
    categories = [
        _category("living"),
        _category("food", "living"),
        _category("bakery", "food"),
        _category("rent", "living"),
        _category("income"),
    ]

    tree = build_category_tree(categories)

    assert [node.category.uuid for node in tree] == ["living", "income"]
    living = tree[0]
    assert [child.category.uuid for child in living.children] == ["food", "rent"]
    assert living.children[0].children[0].category.uuid == "bakery"
    assert living.children[1].children == ()


def test_build_category_tree_rejects_cycle():
    """Test caller-built category lists are checked before linking."""
    with pytest.raises(CyclicHierarchyError):
        build_category_tree([_category("a", "b"), _category("b", "a")])


def test_format_category_path():
    """Test nested category paths use backslash separators."""
    categories = [_category("living", name="Lebenshaltung"), _category("food", "living", "Lebensmittel")]

    assert CategoryService.format_category_path(categories, "food") == "Lebenshaltung\\Lebensmittel"
    assert CategoryService.format_category_path(categories, "living") == "Lebenshaltung"
    assert CategoryService.format_category_path(categories, "unknown") == ""


def test_export_categories(executor, load_fixture):
    """Test the service exports and links the category fixture."""
    executor.queue(load_fixture("categories"))
    service = CategoryService(executor)

    categories = service.export_categories()

    assert executor.commands == ['tell application "MoneyMoney" to export categories']
    assert len(categories) == 6


def test_category_tree_from_service(executor, load_fixture):
    """Test the tree built from the fixture."""
    executor.queue(load_fixture("categories"))

    tree = CategoryService(executor).category_tree()

    assert [node.category.name for node in tree] == ["Einnahmen", "Lebenshaltung", "Ohne Kategorie"]
    assert [child.category.name for child in tree[1].children] == ["Lebensmittel", "Restaurant"]


def test_export_categories_empty(executor):
    """Test no output means no categories."""
    executor.queue(None)

    assert CategoryService(executor).export_categories() == []
