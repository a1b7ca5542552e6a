"""Unit tests for the Customer repositories.

Covers:
- Interface compliance of both implementations.
- CustomerDjangoRepository: get_by_id, find_by_email, add, update, delete.
- InMemoryCustomerRepository: id assignment, identity of stored instances.
- Edge cases: malformed IDs, non-existent records.
"""

from __future__ import annotations

import pytest

from modules.customers.models import Customer
from modules.customers.repositories import (
    CustomerDjangoRepository,
    ICustomerRepository,
    InMemoryCustomerRepository,
)

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_customer(save: bool = True, **overrides) -> Customer:
    """Create a Customer instance with sane defaults."""
    defaults = {
        "name": "Maria Silva",
        "email": "maria@example.com",
        "phone": "11999998888",
    }
    defaults.update(overrides)
    customer = Customer(**defaults)
    if save:
        customer.save()
    return customer


@pytest.fixture()
def repo() -> CustomerDjangoRepository:
    return CustomerDjangoRepository()


@pytest.fixture()
def memory_repo() -> InMemoryCustomerRepository:
    return InMemoryCustomerRepository()


# ===========================================================================
# Instantiation
# ===========================================================================


class TestRepositoryInstantiation:
    def test_django_repository_implements_interface(self, repo):
        assert isinstance(repo, ICustomerRepository)

    def test_memory_repository_implements_interface(self, memory_repo):
        assert isinstance(memory_repo, ICustomerRepository)


# ===========================================================================
# CustomerDjangoRepository
# ===========================================================================


class TestGetById:
    def test_returns_customer_when_found(self, repo):
        customer = _make_customer()
        result = repo.get_by_id(customer.id)
        assert result is not None
        assert result.id == customer.id

    def test_returns_none_when_not_found(self, repo):
        assert repo.get_by_id(999) is None

    def test_returns_none_for_malformed_id(self, repo):
        assert repo.get_by_id("not-a-number") is None


class TestFindByEmail:
    def test_returns_customer_when_found(self, repo):
        customer = _make_customer(email="found@example.com")
        result = repo.find_by_email("found@example.com")
        assert result is not None
        assert result.id == customer.id

    def test_returns_none_when_not_found(self, repo):
        assert repo.find_by_email("ghost@example.com") is None


class TestAdd:
    def test_assigns_identifier(self, repo):
        customer = _make_customer(save=False)
        result = repo.add(customer)
        assert result is customer
        assert result.id is not None
        assert Customer.objects.filter(id=result.id).exists()

    def test_zero_identifier_counts_as_unassigned(self, repo):
        customer = _make_customer(save=False, id=0)
        result = repo.add(customer)
        assert result.id
        assert Customer.objects.count() == 1


class TestUpdate:
    def test_writes_changed_fields(self, repo):
        customer = _make_customer()
        customer.name = "Updated Name"
        customer.phone = "222"
        result = repo.update(customer)
        refreshed = Customer.objects.get(id=customer.id)
        assert refreshed.name == "Updated Name"
        assert refreshed.phone == "222"
        assert result is customer


class TestDelete:
    def test_removes_existing_customer(self, repo):
        customer = _make_customer()
        assert repo.delete(customer) is True
        assert not Customer.objects.filter(id=customer.id).exists()

    def test_returns_false_for_unsaved_customer(self, repo):
        assert repo.delete(_make_customer(save=False)) is False

    def test_returns_false_when_already_deleted(self, repo):
        customer = _make_customer()
        repo.delete(customer)
        assert repo.delete(customer) is False


# ===========================================================================
# InMemoryCustomerRepository
# ===========================================================================


class TestInMemoryRepository:
    def test_add_assigns_sequential_ids(self, memory_repo):
        first = memory_repo.add(_make_customer(save=False))
        second = memory_repo.add(_make_customer(save=False, email="b@example.com"))
        assert (first.id, second.id) == (1, 2)
        assert len(memory_repo) == 2

    def test_add_keeps_explicit_id(self, memory_repo):
        customer = memory_repo.add(_make_customer(save=False, id=7))
        following = memory_repo.add(_make_customer(save=False, email="b@example.com"))
        assert customer.id == 7
        assert following.id == 8

    def test_get_by_id_returns_stored_instance(self, memory_repo):
        customer = memory_repo.add(_make_customer(save=False))
        assert memory_repo.get_by_id(customer.id) is customer
        assert memory_repo.get_by_id(99) is None

    def test_find_by_email(self, memory_repo):
        customer = memory_repo.add(_make_customer(save=False, email="x@example.com"))
        assert memory_repo.find_by_email("x@example.com") is customer
        assert memory_repo.find_by_email("y@example.com") is None

    def test_add_existing_id_raises(self, memory_repo):
        original = memory_repo.add(_make_customer(save=False, id=3))
        with pytest.raises(ValueError, match="already stored"):
            memory_repo.add(_make_customer(save=False, id=3, email="other@example.com"))
        assert memory_repo.get_by_id(3) is original
        assert len(memory_repo) == 1

    def test_update_unknown_customer_raises(self, memory_repo):
        with pytest.raises(KeyError):
            memory_repo.update(_make_customer(save=False, id=5))

    def test_delete(self, memory_repo):
        customer = memory_repo.add(_make_customer(save=False))
        assert memory_repo.delete(customer) is True
        assert memory_repo.delete(customer) is False
        assert memory_repo.get_by_id(customer.id) is None
