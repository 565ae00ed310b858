"""Tests for app.services.folders: duplicate-free creation and folder-scoped product pages."""

from app.models import Folder
from app.services.errors import UserNotFoundError
from app.services.folders import add_folders, get_folders, get_products_in_folder
from app.services.products import add_folder
from support import DatabaseTestCase


class TestAddFolders(DatabaseTestCase):
    def _names(self, user) -> list[str]:
        return sorted(f.name for f in self.db.query(Folder).filter(Folder.user_id == user.id))

    def test_second_call_skips_existing_names(self) -> None:
        alice = self.make_user("alice")
        first = add_folders(self.db, ["A", "B"], "alice")
        second = add_folders(self.db, ["B", "C"], "alice")
        self.assertEqual([f.name for f in first], ["A", "B"])
        self.assertEqual([f.name for f in second], ["C"])
        self.assertEqual(self._names(alice), ["A", "B", "C"])

    def test_same_call_twice_creates_nothing(self) -> None:
        alice = self.make_user("alice")
        add_folders(self.db, ["A", "B"], "alice")
        self.assertEqual(add_folders(self.db, ["A", "B"], "alice"), [])
        self.assertEqual(self._names(alice), ["A", "B"])

    def test_names_of_other_users_do_not_block(self) -> None:
        self.make_user("alice")
        bob = self.make_user("bobby")
        add_folders(self.db, ["A"], "alice")
        self.assertEqual([f.name for f in add_folders(self.db, ["A"], "bobby")], ["A"])
        self.assertEqual(self._names(bob), ["A"])

    def test_repeats_within_one_request_are_kept(self) -> None:
        alice = self.make_user("alice")
        add_folders(self.db, ["A", "A"], "alice")
        self.assertEqual(self._names(alice), ["A", "A"])

    def test_unknown_user(self) -> None:
        with self.assertRaises(UserNotFoundError):
            add_folders(self.db, ["A"], "nobody")


class TestGetFolders(DatabaseTestCase):
    def test_only_own_folders_in_id_order(self) -> None:
        alice = self.make_user("alice")
        bob = self.make_user("bobby")
        self.make_folder(alice, "Z")
        self.make_folder(bob, "B")
        self.make_folder(alice, "A")
        self.assertEqual([f.name for f in get_folders(self.db, self.current(alice))], ["Z", "A"])


class TestGetProductsInFolder(DatabaseTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.alice = self.make_user("alice")
        self.bob = self.make_user("bobby")
        self.folder = self.make_folder(self.alice, "wish")
        self.bob_folder = self.make_folder(self.bob, "wish")
        caller = self.current(self.alice)
        self.in_folder = [self.make_product(self.alice, title=f"in-{i}") for i in range(3)]
        self.make_product(self.alice, title="outside")
        for product in self.in_folder:
            add_folder(self.db, product.id, self.folder.id, caller)
        bob_product = self.make_product(self.bob, title="bob")
        add_folder(self.db, bob_product.id, self.bob_folder.id, self.current(self.bob))

    def test_returns_only_linked_products(self) -> None:
        page = get_products_in_folder(self.db, self.folder.id, 0, 10, "id", True, self.current(self.alice))
        self.assertEqual([p.id for p in page.content], [p.id for p in self.in_folder])
        self.assertEqual(page.total_elements, 3)

    def test_paging(self) -> None:
        page = get_products_in_folder(self.db, self.folder.id, 1, 2, "id", True, self.current(self.alice))
        self.assertEqual([p.id for p in page.content], [self.in_folder[2].id])
        self.assertEqual(page.total_pages, 2)

    def test_foreign_folder_yields_empty_page(self) -> None:
        page = get_products_in_folder(self.db, self.bob_folder.id, 0, 10, "id", True, self.current(self.alice))
        self.assertEqual(page.content, [])
        self.assertEqual(page.total_elements, 0)
