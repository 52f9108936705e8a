import pytest

from storekeeper import repository
from storekeeper.constraints import ErrorBag, MustFixSizeConstraint
from storekeeper.product import Product
from storekeeper.repository import (
    MustUniqueCodeProductConstraint,
    ProductRepository,
    ProductRepositoryImpl,
    get_repository,
)

APPLE = Product("A1", "Apple", 1.5)
BANANA = Product("B2", "Banana", 2.0)
CHERRY = Product("C3", "Cherry", 4.25)


@pytest.fixture
def paths(tmp_path):
    return tmp_path / "data.csv", tmp_path / "remove.csv"


def write_products(path, products):
    path.write_text("".join(p.to_csv_line() for p in products), encoding="utf-8")


def test_repository_is_abstract():
    with pytest.raises(TypeError):
        ProductRepository()


def test_loads_products_from_data_file(paths):
    write_products(paths[0], [APPLE, BANANA])
    repo = ProductRepositoryImpl(*paths)
    assert repo.get_by_code("A1") == APPLE
    assert repo.get_all() == [APPLE, BANANA]


def test_missing_files_give_empty_repository(paths):
    repo = ProductRepositoryImpl(*paths)
    assert repo.get_all() == []
    assert repo.history().inorder() == []


def test_get_by_code_unknown_is_none(paths):
    write_products(paths[0], [APPLE])
    repo = ProductRepositoryImpl(*paths)
    assert repo.get_by_code("ZZ") is None
    assert repo.get_all() == [APPLE]


def test_insert_persists_product(paths):
    repo = ProductRepositoryImpl(*paths)
    product = Product("P1", "Pen", 3.5)
    assert repo.insert(product) is True
    assert paths[0].read_text(encoding="utf-8") == product.to_csv_line()
    reloaded = ProductRepositoryImpl(*paths)
    assert reloaded.get_by_code("P1") == product


def test_get_by_name_matches_prefix(paths):
    write_products(paths[0], [APPLE, BANANA, Product("A9", "Apricot", 3.0)])
    repo = ProductRepositoryImpl(*paths)
    names = sorted(p.name for p in repo.get_by_name("Ap"))
    assert names == ["Apple", "Apricot"]
    assert repo.get_by_name("Kiwi") == []


def test_sort_by_name_both_directions(paths):
    write_products(paths[0], [CHERRY, APPLE, BANANA])
    repo = ProductRepositoryImpl(*paths)
    ascending = repo.get_all_sort_name()
    assert [p.name for p in ascending] == sorted(["Cherry", "Apple", "Banana"])
    assert repo.get_all_sort_name(False) == list(reversed(ascending))


def test_remove_moves_product_to_history(paths):
    write_products(paths[0], [APPLE, BANANA])
    repo = ProductRepositoryImpl(*paths)
    assert repo.remove("A1") is True
    assert repo.get_by_code("A1") is None
    assert repo.get_all() == [BANANA]
    assert repo.get_by_name("App") == []
    assert repo.history().inorder() == [APPLE]
    assert paths[0].read_text(encoding="utf-8") == BANANA.to_csv_line()
    assert paths[1].read_text(encoding="utf-8") == APPLE.to_csv_line()


def test_remove_unknown_code_returns_false(paths):
    write_products(paths[0], [APPLE])
    repo = ProductRepositoryImpl(*paths)
    assert repo.remove("nope") is False
    assert repo.get_all() == [APPLE]


def test_history_loaded_from_removed_file(paths):
    write_products(paths[1], [CHERRY, APPLE])
    repo = ProductRepositoryImpl(*paths)
    assert repo.history().inorder() == [APPLE, CHERRY]
    assert repo.get_all() == []


def test_get_repository_is_shared(monkeypatch, tmp_path):
    monkeypatch.setattr(repository, "_instance", None)
    monkeypatch.chdir(tmp_path)
    first = get_repository()
    assert first is get_repository()
    assert first.get_all() == []


def test_unique_code_rejects_existing(paths):
    write_products(paths[0], [APPLE])
    repo = ProductRepositoryImpl(*paths)
    bag = ErrorBag()
    assert MustUniqueCodeProductConstraint(repo).check("A1", bag) is False
    assert bag.errors == ["Code produk sudah digunakan"]


def test_unique_code_accepts_new_and_chains(paths):
    repo = ProductRepositoryImpl(*paths)
    constraint = MustUniqueCodeProductConstraint(repo)
    constraint.set_next(MustFixSizeConstraint(3))
    bag = ErrorBag()
    assert constraint.check("XYZ", bag) is True
    assert bag.errors == []
    assert constraint.check("XY", bag) is False
    assert bag.errors == ["Input harus memiliki panjang 3"]