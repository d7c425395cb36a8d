"""Mapper functions to convert between plist node trees and domain entities.

This layer isolates the knowledge of MoneyMoney's plist keys, so the domain
entities stay stable when the application's export format changes.

Collection mappers map each element independently and let the first
element error propagate: a partial list of financial records is never
returned as if it were complete.
"""

from typing import Iterable, Optional

from moneymoney.bridge.fields import (
    as_decimal,
    bool_or_default,
    expect_array,
    expect_record,
    optional_datetime,
    optional_date,
    optional_decimal,
    optional_int,
    optional_record,
    optional_string,
    require,
    require_bool,
    require_currency,
    require_date,
    require_decimal,
    require_int,
    require_string,
    string_or_empty,
)
from moneymoney.bridge.nodes import (
    ArrayNode,
    BooleanNode,
    DictNode,
    IntegerNode,
    Node,
    RealNode,
    StringNode,
)
from moneymoney.domain import entities as domain
from moneymoney.domain.currency import Currency
from moneymoney.domain.errors import (
    CyclicHierarchyError,
    MappingError,
    MissingFieldError,
    TypeMismatchError,
)


def _collection_items(node: Node, keys: tuple[str, ...]) -> tuple[Node, ...]:
    """Return the element nodes of an exported collection.

    MoneyMoney returns either a bare array or a record holding the array
    under a well-known key. A record without that key holds no elements.
    """
    if isinstance(node, ArrayNode):
        return node.items
    if isinstance(node, DictNode):
        for key in keys:
            if key in node:
                return expect_array(node.get(key), key).items
        return ()
    raise TypeMismatchError(keys[0], "array", node.kind)


# Accounts


def balance_from_node(node: Node) -> domain.Balance:
    """Convert MoneyMoney's ``[[amount, currency]]`` balance to a Balance."""
    pairs = expect_array(node, "balance").items
    if not pairs:
        raise MissingFieldError("balance")

    pair = expect_array(pairs[0], "balance")
    if len(pair.items) < 2:
        raise TypeMismatchError("balance", "[amount, currency] pair", "short array")

    amount = as_decimal(pair.items[0], "balance")
    code = pair.items[1]
    if not isinstance(code, StringNode):
        raise TypeMismatchError("balance", "string currency", code.kind)
    return domain.Balance(amount=amount, currency=Currency.from_code(code.value))


def _attributes_from_node(record: DictNode) -> dict[str, str]:
    attributes = optional_record(record, "attributes")
    if attributes is None:
        return {}
    result = {}
    for key, value in attributes.entries.items():
        if not isinstance(value, StringNode):
            raise TypeMismatchError(f"attributes.{key}", "string", value.kind)
        result[key] = value.value
    return result


def account_to_domain(node: Node) -> domain.Account:
    """Convert an exported account record to a domain Account entity."""
    record = expect_record(node, "account")
    group = require_bool(record, "group")
    type_label = string_or_empty(record, "type")

    if type_label:
        account_type = domain.AccountType.from_label(type_label)
    elif group:
        account_type = domain.AccountType.GROUP
    else:
        account_type = domain.AccountType.OTHER

    return domain.Account(
        uuid=require_string(record, "uuid"),
        name=require_string(record, "name"),
        group=group,
        account_type=account_type,
        type_label=type_label,
        currency=require_currency(record, "currency"),
        balance=balance_from_node(require(record, "balance")),
        account_number=string_or_empty(record, "accountNumber"),
        bank_code=string_or_empty(record, "bankCode"),
        owner=string_or_empty(record, "owner"),
        portfolio=bool_or_default(record, "portfolio", False),
        indentation=optional_int(record, "indentation") or 0,
        refresh_timestamp=optional_datetime(record, "refreshTimestamp"),
        attributes=_attributes_from_node(record),
    )


def accounts_to_domain(node: Node) -> list[domain.Account]:
    """Convert an account export to a list of Account entities."""
    return [account_to_domain(item) for item in _collection_items(node, ("accounts",))]


# Categories


def budget_to_domain(node: Node, currency: Currency) -> Optional[domain.Budget]:
    """Convert a category's budget record; an empty record means no budget."""
    record = expect_record(node, "budget")
    if not record.entries:
        return None
    return domain.Budget(
        amount=require_decimal(record, "amount"),
        available=require_decimal(record, "available"),
        currency=currency,
        period=string_or_empty(record, "period"),
    )


def category_to_domain(node: Node, parent_uuid: Optional[str] = None) -> domain.Category:
    """Convert an exported category record to a domain Category entity.

    An explicit ``parentUuid`` key in the record wins over ``parent_uuid``.
    """
    record = expect_record(node, "category")
    currency = require_currency(record, "currency")
    budget_node = record.get("budget")

    return domain.Category(
        uuid=require_string(record, "uuid"),
        name=require_string(record, "name"),
        parent_uuid=optional_string(record, "parentUuid") or parent_uuid,
        budget=budget_to_domain(budget_node, currency) if budget_node is not None else None,
        currency=currency,
        group=bool_or_default(record, "group", False),
        default=bool_or_default(record, "default", False),
        indentation=optional_int(record, "indentation") or 0,
    )


def categories_to_domain(node: Node) -> list[domain.Category]:
    """Convert a category export to a list of Category entities.

    MoneyMoney exports categories as a flat, depth-first list in which each
    entry's indentation gives its depth. A category's parent is the nearest
    preceding entry one level shallower.

    Raises:
        CyclicHierarchyError: If explicit parent references form a cycle
    """
    categories = []
    ancestors: list[tuple[int, str]] = []

    for item in _collection_items(node, ("categories",)):
        indentation = optional_int(expect_record(item, "category"), "indentation") or 0
        while ancestors and ancestors[-1][0] >= indentation:
            ancestors.pop()
        parent_uuid = ancestors[-1][1] if ancestors else None

        category = category_to_domain(item, parent_uuid=parent_uuid)
        categories.append(category)
        ancestors.append((indentation, category.uuid))

    check_category_hierarchy(categories)
    return categories


def check_category_hierarchy(categories: Iterable[domain.Category]) -> None:
    """Verify that parent links form a forest.

    Walks each category's parent chain iteratively, remembering which
    categories are already known to lead to a root.

    Raises:
        CyclicHierarchyError: If a category is reachable from itself
        MappingError: If a parent reference names no known category
    """
    by_uuid = {category.uuid: category for category in categories}
    acyclic: set[str] = set()

    for start in by_uuid:
        path: list[str] = []
        on_path: set[str] = set()
        current: Optional[str] = start

        while current is not None and current not in acyclic:
            if current in on_path:
                raise CyclicHierarchyError(current)
            category = by_uuid.get(current)
            if category is None:
                raise MappingError(
                    f"Category '{path[-1]}' references unknown parent '{current}'"
                )
            on_path.add(current)
            path.append(current)
            current = category.parent_uuid

        acyclic.update(path)


def build_category_tree(categories: Iterable[domain.Category]) -> list[domain.CategoryNode]:
    """Link categories into a tree of CategoryNode roots.

    Raises:
        CyclicHierarchyError: If parent links contain a cycle
    """
    categories = list(categories)
    check_category_hierarchy(categories)

    by_uuid = {category.uuid: category for category in categories}
    children: dict[str, list[str]] = {category.uuid: [] for category in categories}
    depth: dict[str, int] = {}

    for category in categories:
        if category.parent_uuid is not None:
            children[category.parent_uuid].append(category.uuid)

        level = 0
        parent = category.parent_uuid
        while parent is not None:
            level += 1
            parent = by_uuid[parent].parent_uuid
        depth[category.uuid] = level

    nodes: dict[str, domain.CategoryNode] = {}
    for uuid in sorted(by_uuid, key=lambda u: depth[u], reverse=True):
        nodes[uuid] = domain.CategoryNode(
            category=by_uuid[uuid],
            children=tuple(nodes[child] for child in children[uuid]),
        )

    return [nodes[c.uuid] for c in categories if c.parent_uuid is None]


# Transactions


def transaction_to_domain(node: Node, require_id: bool = True) -> domain.Transaction:
    """Convert a transaction record to a domain Transaction entity.

    Args:
        node: Transaction record
        require_id: Whether a missing ``id`` is an error. Write payloads
            for new transactions carry no id.
    """
    record = expect_record(node, "transaction")
    booking_date = require_date(record, "bookingDate")

    return domain.Transaction(
        id=require_int(record, "id") if require_id else optional_int(record, "id"),
        account=require_string(record, "accountUuid"),
        booking_date=booking_date,
        value_date=optional_date(record, "valueDate") or booking_date,
        amount=require_decimal(record, "amount"),
        currency=require_currency(record, "currency"),
        name=require_string(record, "name"),
        account_number=string_or_empty(record, "accountNumber"),
        bank_code=string_or_empty(record, "bankCode"),
        purpose=optional_string(record, "purpose"),
        category=optional_string(record, "categoryUuid"),
        checkmark=bool_or_default(record, "checkmark", False),
        comment=optional_string(record, "comment"),
        booked=bool_or_default(record, "booked", True),
    )


def transaction_to_node(transaction: domain.Transaction) -> DictNode:
    """Convert a Transaction to its plist record, using the export keys.

    Absent optional fields are left out rather than written as empty values,
    and dates are written as ``YYYY-MM-DD`` strings.
    """
    entries: dict[str, Node] = {}
    if transaction.id is not None:
        entries["id"] = IntegerNode(transaction.id)
    entries["accountUuid"] = StringNode(transaction.account)
    entries["bookingDate"] = StringNode(transaction.booking_date.isoformat())
    entries["valueDate"] = StringNode(transaction.value_date.isoformat())
    entries["amount"] = RealNode(transaction.amount)
    entries["currency"] = StringNode(transaction.currency.value)
    entries["name"] = StringNode(transaction.name)
    if transaction.account_number:
        entries["accountNumber"] = StringNode(transaction.account_number)
    if transaction.bank_code:
        entries["bankCode"] = StringNode(transaction.bank_code)
    if transaction.purpose is not None:
        entries["purpose"] = StringNode(transaction.purpose)
    if transaction.category is not None:
        entries["categoryUuid"] = StringNode(transaction.category)
    entries["checkmark"] = BooleanNode(transaction.checkmark)
    if transaction.comment is not None:
        entries["comment"] = StringNode(transaction.comment)
    entries["booked"] = BooleanNode(transaction.booked)
    return DictNode(entries)


def transactions_export_to_domain(node: Node) -> domain.TransactionsExport:
    """Convert a transaction export to a TransactionsExport."""
    creator = ""
    if isinstance(node, DictNode):
        creator = string_or_empty(node, "creator")
    items = _collection_items(node, ("transactions",))
    return domain.TransactionsExport(
        creator=creator,
        transactions=tuple(transaction_to_domain(item) for item in items),
    )


def acknowledgment_to_id(node: Node) -> Optional[int]:
    """Interpret the application's answer to a write command.

    Returns:
        The identifier MoneyMoney assigned, or None for a bare success marker

    Raises:
        TypeMismatchError: If the answer is neither ``true``, an integer,
            nor a record with an integer ``id``
    """
    if isinstance(node, BooleanNode):
        if not node.value:
            raise TypeMismatchError("acknowledgment", "true", "false")
        return None
    if isinstance(node, IntegerNode):
        return node.value
    if isinstance(node, DictNode):
        return require_int(node, "id")
    raise TypeMismatchError("acknowledgment", "true, integer or record", node.kind)


# Portfolio


def position_to_domain(node: Node) -> domain.PortfolioPosition:
    """Convert an exported security record to a PortfolioPosition entity."""
    record = expect_record(node, "security")
    return domain.PortfolioPosition(
        uuid=require_string(record, "uuid"),
        name=require_string(record, "name"),
        quantity=require_decimal(record, "quantity"),
        currency=require_currency(record, "currency"),
        market_value=require_decimal(record, "marketValue"),
        account_uuid=require_string(record, "accountUuid"),
        account_name=string_or_empty(record, "accountName"),
        isin=string_or_empty(record, "isin"),
        wkn=string_or_empty(record, "wkn"),
        symbol=string_or_empty(record, "symbol"),
        price=optional_decimal(record, "marketPrice"),
        purchase_price=optional_decimal(record, "purchasePrice"),
        purchase_value=optional_decimal(record, "purchaseValue"),
        profit=optional_decimal(record, "profit"),
        profit_percent=optional_decimal(record, "profitPercent"),
        asset_class=string_or_empty(record, "assetClass"),
    )


def positions_to_domain(node: Node) -> list[domain.PortfolioPosition]:
    """Convert a portfolio export to a list of PortfolioPosition entities."""
    items = _collection_items(node, ("portfolio", "securities"))
    return [position_to_domain(item) for item in items]
