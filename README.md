# sanduba

A small console point-of-sale for a sandwich shop. It keeps a product
catalogue with stock and prices, sells sandwiches put together step by step
(size, bread, filling, cheese, sauce and up to three vegetables), keeps
records of clients, employees and administrators, and computes a financial
report.

The prompts and printed texts are in Brazilian Portuguese.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running

```
sanduba [--products FILE] [--balance AMOUNT]
```

The command runs three stages in order:

1. The product menu: register, search, change (name, type, cost price,
   sale price), list and restock products. Restocking is paid from the bank
   balance and is refused when the balance does not cover it.
2. A sandwich order: the number of sandwiches, then for each one the size
   (15cm or 30cm), bread, filling, cheese, sauce and optionally up to three
   vegetables, a summary with the price, and a confirmation. Typing 0 at a
   step gives up the order. Every third sandwich bought by the same client
   costs 30% less.
3. The financial report, printed to standard output.

Options:

- `--products FILE` – a JSON file with the product stock. It is read at
  start if it exists and written back at the end.
- `--balance AMOUNT` – the starting bank balance (default `10000`).

Ending the input (Ctrl-D) skips straight to the report.

## Using it as a library

- `sanduba.models` holds the data: `Product`, `ProductType`, `Sandwich`
  (with `portions()`, `ingredients()` and `compute_price()`), `Client`,
  `Employee`, `Admin`, `Person`, `Address`, `Credentials` and `Status`.
- `sanduba.inventory.Inventory` registers products, renames them, changes
  their type or prices, restocks them by name against a bank balance or by
  id, searches by name prefix, and lists them by type, by stock or by units
  sold. `format_product` and `format_stock_line` give printable text.
- `sanduba.ordering.check_availability` tells whether a product can go into
  a sandwich of a given size; `checkout` sells a built `Sandwich` to a
  `Client`, updating stock and sales and returning a `Receipt` with the
  discount on every third purchase; `describe_sandwich` and
  `describe_recommendation` give printable text; `buy_recommended` sells a
  client's last sandwich again at full price.
- `sanduba.clients.ClientRegistry` registers, finds, removes, blocks and
  unblocks clients and checks passwords; `is_blank` and `format_client`
  help with input and listing.
- `sanduba.employees.EmployeeRegistry` registers, finds and removes
  employees.
- `sanduba.admins.AdminRegistry` registers, finds, disables and enables
  administrators; `authenticate` logs a client or an administrator in and
  returns a `Role`, raising `AuthenticationError` on a wrong login or
  password.
- `sanduba.finance.build_report` computes revenue, expenses, profit and
  bank balance; `FinancialReport.render` gives the printable text.
- `sanduba.persistence` saves and loads products, clients, administrators
  and employees as JSON files.
- `sanduba.screens` reads and shows the text banner of each `Screen` from a
  directory.

```python
from sanduba.inventory import Inventory
from sanduba.models import ProductType
from sanduba.finance import build_report

inventory = Inventory([], 100)
inventory.register("Italiano", ProductType.BREAD, 1.0, 2.5)
balance = inventory.restock("Italiano", 10, 10000.0)

report = build_report(list(inventory), balance, 0.01, 0.001)
print(report.render())
```

## What it does not do

- The `sanduba` command covers products, one sandwich order and the report
  only. It has no login, no menus for clients, employees or administrators,
  and it sells to an anonymous client that is not stored; those records are
  reachable through the library alone.
- Only the product stock is kept between runs by the command; clients,
  employees and administrators are saved only when a program calls
  `sanduba.persistence` itself.
- No screen banner files ship with the package; `sanduba.screens` raises
  `FileNotFoundError` until they are placed in the directory it is given.