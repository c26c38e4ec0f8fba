import pytest

from web_distribution.dtos import Allocation, Company, Inventory, TransactionItem
from web_distribution.exceptions import BadResponseError, NotFoundException
from web_distribution.repositories import TransactionRepository


def test_find_by_transaction_number_requests_exact_match(fake_client, transaction_payload):
    fake_client.queue([transaction_payload])
    repo = TransactionRepository(fake_client)

    transaction = repo.find_by_transaction_number(Company(id=1), "S-100234")

    assert transaction.id == 9001
    method, path, query = fake_client.calls[0]
    assert (method, path) == ("GET", "api/transaction")
    assert query["company"] == 1
    assert query["transaction_number"] == "S-100234"
    assert query["transaction_number_exact"] is True
    assert "items.allocatedPieces.piece.warehouse" in query["with"]
    assert "holds.hold" in query["with"]


def test_find_by_transaction_number_not_found_on_bad_response(fake_client):
    fake_client.queue(BadResponseError("404", status_code=404))
    repo = TransactionRepository(fake_client)

    with pytest.raises(NotFoundException):
        repo.find_by_transaction_number(1, "S-0")


def test_find_by_transaction_number_not_found_on_empty_result(fake_client):
    fake_client.queue([])
    repo = TransactionRepository(fake_client)

    with pytest.raises(NotFoundException):
        repo.find_by_transaction_number(1, "S-0")


def test_unallocate_accepts_item_or_id(fake_client):
    fake_client.queue(None, None)
    repo = TransactionRepository(fake_client)

    repo.unallocate(TransactionItem(id=501))
    repo.unallocate(502)

    assert fake_client.calls == [
        ("POST", "api/transaction-item/501/unallocate", None),
        ("POST", "api/transaction-item/502/unallocate", None),
    ]


def test_unallocate_rejects_other_types(fake_client):
    repo = TransactionRepository(fake_client)

    with pytest.raises(TypeError):
        repo.unallocate("501")

    assert fake_client.calls == []


def test_allocate_posts_full_piece_map(fake_client):
    fake_client.queue(None)
    repo = TransactionRepository(fake_client)

    repo.allocate(
        TransactionItem(id=501),
        [Allocation(inventory_id=5, quantity=2), Allocation(inventory_id=7, quantity=3)],
    )

    assert fake_client.calls == [("POST", "api/transaction-item/501/reallocate", {5: 2, 7: 3})]


def test_allocate_last_duplicate_wins(fake_client):
    fake_client.queue(None)
    repo = TransactionRepository(fake_client)

    repo.allocate(
        TransactionItem(id=501),
        [
            Allocation(inventory_id=5, quantity=2),
            Allocation(inventory_id=7, quantity=3),
            Allocation(inventory_id=5, quantity=9),
        ],
    )

    assert fake_client.calls[0][2] == {5: 9, 7: 3}


def test_allocate_single_uses_ordered_quantity(fake_client):
    fake_client.queue(None)
    repo = TransactionRepository(fake_client)

    repo.allocate_single(TransactionItem(id=501, quantity_ordered=12.5), Inventory(id=77))

    assert fake_client.calls == [("POST", "api/transaction-item/501/reallocate", {77: 12.5})]


def test_allocate_single_id(fake_client):
    fake_client.queue(None)
    repo = TransactionRepository(fake_client)

    repo.allocate_single_id(501, 78, 4)

    assert fake_client.calls == [("POST", "api/transaction-item/501/reallocate", {78: 4})]
