"""Interactive menus: product management and sandwich purchase."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, TextIO

from .finance import build_report
from .inventory import (
    DuplicateProductError,
    InsufficientFundsError,
    Inventory,
    format_product,
)
from .models import MAX_VEGETABLES, Client, Product, ProductType, Sandwich
from .ordering import Availability, check_availability, checkout, describe_sandwich
from .persistence import load_products, save_products

Ask = Callable[[str], str]

INITIAL_BALANCE = 10000.0
SALARY_RATE = 0.01
OTHER_EXPENSES_RATE = 0.001

INVALID = "\nComando inválido. Por favor, insira um dos números indicados.\n\n"
THANKS = "Agradecemos pela preferência!"

PRODUCT_MENU = (
    "Para gerenciar os produtos, siga o menu: 1- Cadastro, 2-Pesquisa, 3-Alterar, "
    "4-impressão,5-Comprar, 6-sair\n"
)
CHANGE_MENU = (
    "Siga as opções para alteração dos produtos:\n"
    "1-nome do produto\n"
    "2-tipo do produto\n"
    "3-valor de compra\n"
    "4-valor de venda\n"
    "5-valores de compra e venda\n"
    "6-desistir da alteração\n"
)
TYPE_PROMPT = "Digite o tipo do produto: 1-pao, 2-recheio, 3-queijo, 4-molho, 5-vegetal\n"

_STEPS = (
    ("SEGUNDO PASSO", "Escolha o tipo de pão do seu sanduíche!", ProductType.BREAD, "bread"),
    ("TERCEIRO PASSO", "Escolha o recheio do seu sanduíche!", ProductType.FILLING, "filling"),
    ("QUARTO PASSO", "Escolha o tipo de queijo do seu sanduíche!", ProductType.CHEESE, "cheese"),
    ("QUINTO PASSO", "Escolha o tipo de molho do seu sanduíche!", ProductType.SAUCE, "sauce"),
)


class _Cancelled(Exception):
    """The customer typed 0 to give up the purchase."""


def _int(ask: Ask, prompt: str = "") -> int | None:
    try:
        return int(ask(prompt).strip())
    except ValueError:
        return None


def _float(ask: Ask, out: TextIO, prompt: str) -> float:
    while True:
        try:
            return float(ask(prompt).strip().replace(",", "."))
        except ValueError:
            out.write(INVALID)


def _choice(ask: Ask, out: TextIO, prompt: str, options: range, message: str = INVALID) -> int:
    while True:
        value = _int(ask, prompt)
        if value in options:
            return value
        if message:
            out.write(message)


def _line(ask: Ask, prompt: str) -> str:
    return ask(prompt).rstrip("\n")


def _register(inventory: Inventory, ask: Ask, out: TextIO) -> None:
    name = _line(ask, "Digite o nome do produto:\n")
    if inventory.find(name) is not None:
        out.write("Não foi possível realizar o cadastro. Produto já cadastrado!\n")
        return
    kind = _choice(ask, out, TYPE_PROMPT, range(1, 6), message="")
    cost = _float(ask, out, "Digite o valor da compra.\n")
    sale = _float(ask, out, "Digite o valor da venda.\n")
    try:
        inventory.register(name, kind, cost, sale)
    except ValueError as error:
        out.write(f"Não foi possível realizar o cadastro: {error}\n")


def _change(inventory: Inventory, ask: Ask, out: TextIO) -> None:
    name = _line(ask, "Digite o nome do produto a ser alterado:\n")
    if inventory.find(name) is None:
        out.write("Não foi possível a alteração. Produto não cadastrado!\n")
        return
    option = _choice(ask, out, CHANGE_MENU, range(1, 7), message="")
    if option == 1:
        new_name = _line(ask, "Digite o novo nome do produto.\n")
        try:
            inventory.rename(name, new_name)
        except DuplicateProductError:
            out.write("Alteração não foi efetivada! Nome já cadastrado!\n")
    elif option == 2:
        prompt = "Digite o novo tipo do produto: 1-pao, 2-recheio, 3-queijo, 4-molho, 5-vegetal\n"
        inventory.change_type(name, _choice(ask, out, prompt, range(1, 6), message=""))
    elif option == 3:
        inventory.change_prices(name, cost_price=_float(ask, out, "Digite o novo valor da compra.\n"))
    elif option == 4:
        inventory.change_prices(name, sale_price=_float(ask, out, "Digite o novo valor da venda.\n"))
    elif option == 5:
        cost = _float(ask, out, "Digite o novo valor da compra.\n")
        sale = _float(ask, out, "Digite o novo valor da venda.\n")
        inventory.change_prices(name, cost_price=cost, sale_price=sale)


def _buy_stock(inventory: Inventory, balance: float, ask: Ask, out: TextIO) -> float:
    name = _line(ask, "Digite o nome do produto a ser estocado:\n")
    product = inventory.find(name)
    if product is None:
        out.write("Não foi possível efetuar a compra. Produto não cadastrado!\n")
        return balance
    out.write(format_product(product) + "\n\n")
    quantity = _choice(
        ask, out, "Digite a quantidade de produtos a ser estocado:\n", range(0, sys.maxsize)
    )
    try:
        return inventory.restock(name, quantity, balance)
    except InsufficientFundsError:
        out.write(
            "Saldo bancário insuficiente para realizar a compra! "
            f"O saldo bancário atual é {balance:.2f}:\n"
        )
        return balance


def run_product_menu(
    inventory: Inventory, balance: float, ask: Ask | None = None, out: TextIO | None = None
) -> float:
    """Run the product management menu until the user leaves; return the new balance."""
    ask = ask if ask is not None else input
    out = out if out is not None else sys.stdout
    while True:
        option = _choice(ask, out, PRODUCT_MENU, range(1, 7), message="")
        if option == 6:
            return balance
        if option == 1:
            _register(inventory, ask, out)
        elif option == 2:
            name = _line(ask, "Digite o nome do produto a ser pesquisado:\n")
            product = inventory.find(name)
            if product is None:
                out.write("Produto não cadastrado.\n")
            else:
                out.write(format_product(product) + "\n\n")
        elif option == 3:
            _change(inventory, ask, out)
        elif option == 4:
            for product in inventory:
                out.write(format_product(product) + "\n\n")
        elif option == 5:
            balance = _buy_stock(inventory, balance, ask, out)


def _list_options(inventory: Inventory, kind: ProductType, out: TextIO) -> None:
    for product in inventory.by_type(kind):
        sold_out = " (Esgotado)" if product.quantity <= 0 else ""
        out.write(f"{product.id} - {product.name}{sold_out}\n")


def _pick(inventory: Inventory, kind: ProductType, size: int, ask: Ask, out: TextIO) -> Product:
    while True:
        choice = _int(ask)
        if choice == 0:
            raise _Cancelled
        if choice is None:
            out.write(INVALID)
            continue
        availability = check_availability(inventory, choice, kind, size)
        if availability is Availability.AVAILABLE:
            return inventory.get(choice)
        if availability is Availability.SOLD_OUT:
            out.write("\nProduto esgotado. Por favor, escolha outra opção.\n\n")
        elif availability is Availability.ONLY_ONE_LEFT:
            out.write("Há apenas uma unidade desse produto. Por favor, escolha outra opção.\n\n")
        else:
            out.write(INVALID)


def _pick_vegetables(inventory: Inventory, ask: Ask, out: TextIO) -> list[Product]:
    salad: list[Product] = []
    while len(salad) < MAX_VEGETABLES:
        salad.append(_pick(inventory, ProductType.VEGETABLE, 15, ask, out))
        left = MAX_VEGETABLES - len(salad)
        if left == 0:
            break
        prompt = (
            f"\nDeseja pôr mais alguma verdura? (Você ainda pode colocar mais {left}!)\n\n"
            "1 - Sim\n2 - Não\n\n"
        )
        if _choice(ask, out, prompt, range(1, 3)) == 2:
            break
        out.write("\nEscolha a próxima verdura!\n\n")
    return salad


def _build_sandwich(inventory: Inventory, ask: Ask, out: TextIO) -> Sandwich:
    out.write("\tPRIMEIRO PASSO:\nEscolha o tamanho do seu sanduíche!\n\n1 - 15cm\n2 - 30cm\n\n")
    while True:
        choice = _int(ask)
        if choice == 0:
            raise _Cancelled
        if choice in (1, 2):
            break
        out.write(INVALID)
    sandwich = Sandwich(size=15 if choice == 1 else 30)
    for step, title, kind, attribute in _STEPS:
        out.write(f"\t\n\n{step}:\n{title}\n")
        _list_options(inventory, kind, out)
        setattr(sandwich, attribute, _pick(inventory, kind, sandwich.size, ask, out))
    prompt = "\nVocê deseja adicionar verduras ao seu Sanduíche?\n\n1 - Sim\n2 - Não"
    if _choice(ask, out, prompt, range(1, 3)) == 1:
        out.write(
            "\t\n\nSEXTO PASSO:\n"
            "Escolha as verduras que colocará em seu sanduíche (no máximo 3 tipos)!\n"
        )
        _list_options(inventory, ProductType.VEGETABLE, out)
        sandwich.salad = _pick_vegetables(inventory, ask, out)
    sandwich.compute_price()
    return sandwich


def _confirm(ask: Ask, out: TextIO) -> bool:
    """True to buy the sandwich, False to build it again; _Cancelled to finish."""
    prompt = "\n\nDeseja comprar esse Sanduíche?\n\n1 - Sim\n2 - Não"
    if _choice(ask, out, prompt, range(1, 3)) == 1:
        return True
    prompt = (
        "\n\nTem certeza? Isso irá desfazer as escolhas pro sanduíche até então!"
        "\n\n1 - Sim\n2 - Não"
    )
    if _choice(ask, out, prompt, range(1, 3)) == 2:
        return True
    prompt = "\nDeseja...\n\n1 - Refazer o seu sanduíche.\n2 - Finalizar a compra assim mesmo."
    if _choice(ask, out, prompt, range(1, 3)) == 2:
        raise _Cancelled
    return False


def run_sandwich_purchase(
    inventory: Inventory, client: Client, ask: Ask | None = None, out: TextIO | None = None
) -> float:
    """Let a client build and buy sandwiches; return the total amount charged."""
    ask = ask if ask is not None else input
    out = out if out is not None else sys.stdout
    prompt = (
        "Antes de tudo, por favor, digite o número de sanduíches que você deseja comprar "
        "(digitar 0 irá cancelar a compra):"
    )
    while True:
        count = _int(ask, prompt)
        if count is not None and count >= 0:
            break
        out.write("\nComando inválido, por favor insira um dos números indicados.\n\n")
    if count == 0:
        out.write(f"\n{THANKS}\n\n")
        return 0.0
    total = 0.0
    try:
        for number in range(1, count + 1):
            label = "" if count == 1 else f" {number}"
            out.write(
                f"\nHora de começar a compra de seu Sanduíche{label} "
                "(novamente, digitar 0 em qualquer passo irá cancelar a compra)!\n\n"
            )
            while True:
                sandwich = _build_sandwich(inventory, ask, out)
                out.write("\nConferindo:\n\n" + describe_sandwich(sandwich))
                if _confirm(ask, out):
                    break
            receipt = checkout(inventory.products, sandwich, client)
            if receipt.discounted:
                out.write(
                    f"\nO senhor(a) obteve um desconto de {receipt.discount:.2f} "
                    "na compra do sanduíche\n\n"
                )
            total += receipt.charged
    except _Cancelled:
        out.write(f"\n\n{THANKS}\n")
        return total
    out.write(f"\nO valor total de sua compra foi: R$ {total:.2f}\n\n{THANKS}")
    return total


def main(argv=None) -> int:
    """Manage products, sell sandwiches and print the financial report."""
    parser = argparse.ArgumentParser(prog="sanduba", description="Sandwich shop manager.")
    parser.add_argument("--products", help="JSON file holding the product stock")
    parser.add_argument("--balance", type=float, default=INITIAL_BALANCE, help="bank balance")
    args = parser.parse_args(argv)

    products = []
    if args.products and Path(args.products).exists():
        products = load_products(args.products)
    inventory = Inventory(products)
    balance = args.balance
    client = Client()
    out = sys.stdout
    try:
        balance = run_product_menu(inventory, balance, input, out)
        balance += run_sandwich_purchase(inventory, client, input, out)
    except EOFError:
        out.write("\n")
    out.write(build_report(inventory, balance, SALARY_RATE, OTHER_EXPENSES_RATE).render())
    if args.products:
        save_products(args.products, inventory)
    return 0


if __name__ == "__main__":
    sys.exit(main())