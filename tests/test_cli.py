import io

import pytest

from sanduba.cli import main, run_product_menu, run_sandwich_purchase
from sanduba.inventory import Inventory
from sanduba.models import Client, ProductType
from sanduba.persistence import load_products


def scripted(*answers):
    queue = list(answers)

    def ask(prompt=""):
        if not queue:
            raise EOFError
        return queue.pop(0)

    return ask


@pytest.fixture
def stocked():
    inventory = Inventory()
    inventory.register("Pão", ProductType.BREAD, 0.5, 1.0)
    inventory.register("Frango", ProductType.FILLING, 1.0, 2.0)
    inventory.register("Prato", ProductType.CHEESE, 1.0, 3.0)
    inventory.register("Barbecue", ProductType.SAUCE, 1.0, 4.0)
    inventory.register("Alface", ProductType.VEGETABLE, 0.1, 0.5)
    for product in inventory:
        inventory.restock_by_id(product.id, 10)
    return inventory


# --- product menu ---

def test_register_product_through_menu():
    inventory = Inventory()
    out = io.StringIO()
    balance = run_product_menu(inventory, 50.0, scripted("1", "Pão francês", "1", "0.5", "1.0", "6"), out)
    product = inventory.find("Pão francês")
    assert product.kind == ProductType.BREAD
    assert product.cost_price == 0.5
    assert product.sale_price == 1.0
    assert balance == 50.0


def test_register_retries_invalid_type():
    inventory = Inventory()
    run_product_menu(inventory, 0.0, scripted("1", "Queijo", "9", "3", "1", "2", "6"), io.StringIO())
    assert inventory.find("Queijo").kind == ProductType.CHEESE


def test_register_duplicate_is_reported(stocked):
    out = io.StringIO()
    run_product_menu(stocked, 0.0, scripted("1", "Pão", "6"), out)
    assert "Produto já cadastrado" in out.getvalue()
    assert len(stocked) == 5


def test_search_prints_product_or_not_found(stocked):
    out = io.StringIO()
    run_product_menu(stocked, 0.0, scripted("2", "Frango", "2", "Nada", "6"), out)
    text = out.getvalue()
    assert "Nome - Frango" in text
    assert "Produto não cadastrado." in text


def test_listing_prints_every_product(stocked):
    out = io.StringIO()
    run_product_menu(stocked, 0.0, scripted("4", "6"), out)
    text = out.getvalue()
    assert all(f"Nome - {p.name}" in text for p in stocked)


def test_rename_through_menu(stocked):
    run_product_menu(stocked, 0.0, scripted("3", "Pão", "1", "Pão italiano", "6"), io.StringIO())
    assert stocked.find("Pão") is None
    assert stocked.find("Pão italiano").id == 1


def test_rename_to_existing_name_is_refused(stocked):
    out = io.StringIO()
    run_product_menu(stocked, 0.0, scripted("3", "Pão", "1", "Frango", "6"), out)
    assert "Nome já cadastrado" in out.getvalue()
    assert stocked.find("Pão").id == 1


def test_change_both_prices(stocked):
    run_product_menu(stocked, 0.0, scripted("3", "Prato", "5", "2.5", "6.5", "6"), io.StringIO())
    product = stocked.find("Prato")
    assert (product.cost_price, product.sale_price) == (2.5, 6.5)


def test_change_unknown_product_is_reported(stocked):
    out = io.StringIO()
    run_product_menu(stocked, 0.0, scripted("3", "Nada", "6"), out)
    assert "Produto não cadastrado!" in out.getvalue()


def test_buy_stock_reduces_balance(stocked):
    product = stocked.find("Pão")
    before = product.quantity
    balance = run_product_menu(stocked, 100.0, scripted("5", "Pão", "10", "6"), io.StringIO())
    assert product.quantity == before + 10
    assert balance + product.total_cost == pytest.approx(100.0)


def test_buy_stock_insufficient_funds(stocked):
    product = stocked.find("Frango")
    before = product.quantity
    out = io.StringIO()
    balance = run_product_menu(stocked, 1.0, scripted("5", "Frango", "10", "6"), out)
    assert "Saldo bancário insuficiente" in out.getvalue()
    assert balance == 1.0
    assert product.quantity == before


def test_menu_stops_when_input_ends():
    with pytest.raises(EOFError):
        run_product_menu(Inventory(), 0.0, scripted("4"), io.StringIO())


# --- sandwich purchase ---

def test_zero_sandwiches_cancels(stocked):
    out = io.StringIO()
    total = run_sandwich_purchase(stocked, Client(), scripted("0"), out)
    assert total == 0.0
    assert all(p.quantity == 10 for p in stocked)


def test_buy_one_small_sandwich(stocked):
    client = Client()
    total = run_sandwich_purchase(
        stocked, client, scripted("1", "1", "1", "2", "3", "4", "2", "1"), io.StringIO()
    )
    assert total == client.last_sandwich.price
    assert client.purchases == 1
    assert stocked.get(1).quantity == 9
    assert stocked.get(5).quantity == 10


def test_buy_large_sandwich_with_vegetable(stocked):
    client = Client()
    run_sandwich_purchase(
        stocked, client, scripted("1", "2", "1", "2", "3", "4", "1", "5", "2", "1"), io.StringIO()
    )
    assert client.last_sandwich.size == 30
    assert [p.name for p in client.last_sandwich.salad] == ["Alface"]
    assert stocked.get(1).quantity == 8
    assert stocked.get(1).sold == 2


def test_sold_out_bread_is_refused(stocked):
    stocked.get(1).quantity = 0
    stocked.register("Integral", ProductType.BREAD, 0.5, 1.5)
    stocked.restock_by_id(6, 5)
    client = Client()
    out = io.StringIO()
    run_sandwich_purchase(
        stocked, client, scripted("1", "1", "1", "6", "2", "3", "4", "2", "1"), out
    )
    assert "Produto esgotado" in out.getvalue()
    assert client.last_sandwich.bread.name == "Integral"


def test_only_one_unit_refused_for_large(stocked):
    stocked.get(2).quantity = 1
    out = io.StringIO()
    total = run_sandwich_purchase(stocked, Client(), scripted("1", "2", "1", "2", "0"), out)
    assert "Há apenas uma unidade" in out.getvalue()
    assert total == 0.0


def test_invalid_id_is_reported(stocked):
    out = io.StringIO()
    run_sandwich_purchase(stocked, Client(), scripted("1", "1", "2", "0"), out)
    assert "Comando inválido" in out.getvalue()
    assert stocked.get(1).quantity == 10


def test_third_purchase_is_discounted(stocked):
    client = Client(purchases=2)
    out = io.StringIO()
    total = run_sandwich_purchase(
        stocked, client, scripted("1", "1", "1", "2", "3", "4", "2", "1"), out
    )
    assert "desconto" in out.getvalue()
    assert 0 < total < client.last_sandwich.price
    assert client.purchases == 3


def test_redo_sandwich_then_buy(stocked):
    client = Client()
    answers = ["1", "1", "1", "2", "3", "4", "2", "2", "1", "1",
               "2", "1", "2", "3", "4", "2", "1"]
    run_sandwich_purchase(stocked, client, scripted(*answers), io.StringIO())
    assert client.purchases == 1
    assert client.last_sandwich.size == 30
    assert stocked.get(1).quantity == 8


def test_finish_without_buying(stocked):
    client = Client()
    total = run_sandwich_purchase(
        stocked, client, scripted("1", "1", "1", "2", "3", "4", "2", "2", "1", "2"), io.StringIO()
    )
    assert total == 0.0
    assert client.purchases == 0
    assert all(p.quantity == 10 for p in stocked)


def test_not_sure_keeps_sandwich(stocked):
    client = Client()
    total = run_sandwich_purchase(
        stocked, client, scripted("1", "1", "1", "2", "3", "4", "2", "2", "2"), io.StringIO()
    )
    assert client.purchases == 1
    assert total == client.last_sandwich.price


def test_two_sandwiches_sum(stocked):
    client = Client()
    one = ["1", "1", "2", "3", "4", "2", "1"]
    total = run_sandwich_purchase(stocked, client, scripted("2", *one, *one), io.StringIO())
    assert client.purchases == 2
    assert total == pytest.approx(2 * client.last_sandwich.price)
    assert stocked.get(1).quantity == 8


# --- main ---

def test_main_prints_report(monkeypatch, capsys):
    answers = iter(["6", "0"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    assert "(=) LUCRO:" in capsys.readouterr().out


def test_main_saves_products(monkeypatch, tmp_path, capsys):
    path = tmp_path / "storage.json"
    answers = iter(["1", "Pão", "1", "0.5", "1.0", "6", "0"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    main(["--products", str(path)])
    products = load_products(path)
    assert [p.name for p in products] == ["Pão"]
    assert "SALDO BANCÁRIO" in capsys.readouterr().out