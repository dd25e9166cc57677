import uuid
from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError

from app.data.models import CartModel, CartStatus, SnackModel
from app.data.seed import SNACKS, seed
from app.repos.cart_repo import CartRepo
from app.repos.item_repo import ItemRepo
from app.repos.snack_repo import SnackRepo


class TestCartRepo:
    def test_pending_cart_lookup_ignores_confirmed(self, db, user, make_cart):
        make_cart(user, status=CartStatus.CONFIRMED)
        pending = make_cart(user)

        found = CartRepo(db).get_pending_cart_for_user(uuid.UUID(user.id))

        assert found.id == pending.id

    def test_second_pending_cart_for_user_is_rejected(self, db, user, make_cart):
        make_cart(user)

        db.add(CartModel(user_id=uuid.UUID(user.id), status=CartStatus.PENDING))
        with pytest.raises(IntegrityError):
            db.commit()
        db.rollback()

    def test_update_cart_status_is_conditional(self, db, user, make_cart):
        cart = make_cart(user)
        repo = CartRepo(db)

        first = repo.update_cart_status(cart.id, CartStatus.PENDING, CartStatus.CONFIRMED)
        repo.commit()
        second = repo.update_cart_status(cart.id, CartStatus.PENDING, CartStatus.CONFIRMED)
        repo.commit()

        assert (first, second) == (1, 0)
        assert repo.get_cart(cart.id).status == CartStatus.CONFIRMED


class TestItemRepo:
    def test_get_item_in_cart(self, db, user, make_cart, make_snack, make_item):
        cart = make_cart(user)
        snack = make_snack()
        item = make_item(cart, snack, 2)
        repo = ItemRepo(db)

        assert repo.get_item_in_cart(cart.id, snack.id).id == item.id
        assert repo.get_item_in_cart(cart.id, uuid.uuid4()) is None

    def test_delete_item(self, db, user, make_cart, make_snack, make_item):
        item = make_item(make_cart(user), make_snack(), 1)
        repo = ItemRepo(db)

        repo.delete_item(item)
        db.commit()

        assert repo.get_item(item.id) is None


class TestSeed:
    def test_seeds_only_empty_table(self, db):
        assert seed(db) == len(SNACKS)
        assert seed(db) == 0
        assert len(SnackRepo(db).list_snacks()) == len(SNACKS)

    def test_seed_commits_once(self, db, monkeypatch):
        commits = []
        original_commit = db.commit

        def _counting_commit():
            commits.append(True)
            original_commit()

        monkeypatch.setattr(db, "commit", _counting_commit)

        seed(db)

        assert len(commits) == 1


class TestSnackRepo:
    def test_create_snack_leaves_commit_to_caller(self, db):
        repo = SnackRepo(db)

        repo.create_snack(SnackModel(name="Chips", price=Decimal("2.49"), quantity=3))
        db.rollback()

        assert repo.list_snacks() == []
