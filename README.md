# pacshop

pacshop is a small web shop built on the Presentation-Abstraction-Control
pattern. An in-memory store holds customers, sellers, products and orders.
A Flask application serves HTML views of them and accepts new products and
orders as JSON.

## Running the server

```
pacshop
```

This starts the server on `0.0.0.0`, port 8080, with the built-in sample
data. The options `--host` and `--port` change where it listens:

```
pacshop --host 127.0.0.1 --port 5000
```

The sample data has two customers (ids 0 and 1), two sellers (ids 2 and 3),
four products (ids 0 to 3, the first two sold by seller 2, the others by
seller 3) and three orders.

## Pages

| Method | Path                  | What it returns                                      |
|--------|-----------------------|------------------------------------------------------|
| GET    | `/<user_id>`          | Landing page for the user, with product and order frames |
| GET    | `/product/<user_id>`  | Product table: all products for a customer, the seller's own for a seller |
| GET    | `/order/<user_id>`    | Order table, one row per product: the customer's orders, or orders holding the seller's products |
| POST   | `/product`            | Creates a product (201), 400 on invalid JSON, 500 on other errors |
| POST   | `/order`              | Creates an order (201), 400 on invalid JSON, 500 on other errors |

The landing page reloads the order frame every half second and the product
frame every thirty seconds, so new entries show up without a manual refresh.

### Creating a product

Send a JSON body like this to `POST /product`:

```json
{
  "id": 4,
  "name": "Product4",
  "quantity": 25,
  "seller": {"id": 2}
}
```

### Creating an order

Send a JSON body like this to `POST /order`:

```json
{
  "id": 3,
  "customer": {"id": 0},
  "products": [
    {"id": 0, "name": "Product0", "quantity": 1, "seller": {"id": 2}}
  ]
}
```

Ids and quantities must be JSON integers and names strings. Users are looked
up by id; an unknown id makes the request fail with a 500 response naming the
missing user. A missing field or a value of the wrong type also gives a 500
response, with the text `Error creating product: ...` or
`Error creating order: ...`.

## Using it from Python

The application is an ordinary Flask app built by `create_app`, so it can be
embedded or driven with Flask's test client:

```python
from pacshop.app import create_app
from pacshop.database import Database

app = create_app(Database())
client = app.test_client()
print(client.get("/product/0").get_data(as_text=True))
```

The layers can also be used on their own:

- `pacshop.database.Database` holds the lists `customers`, `sellers`,
  `users`, `products` and `orders`, seeded with the sample data.
- `pacshop.abstractions` holds the data access: `LandingPageAbstraction`
  (`get_user`), `ProductAbstraction` (`all_products`, `products_for_seller`,
  `create_product`) and `OrderAbstraction` (`orders_for_customer`,
  `orders_for_seller`, `create_order`).
- `pacshop.controllers` holds the role-aware logic: `ProductController`
  (`products_for_user`), `OrderController` (`orders_for_user`) and
  `LandingPageController`, plus the `ProductView` and `OrderView` protocols
  that a presenter subscribes under.
- `pacshop.presenters` holds the HTML rendering: `LandingPagePresenter`
  (`show_page`), `ProductPresenter` (`show_product`) and `OrderPresenter`
  (`show_order`), which take a `Message` carrying the user. Each renderer
  returns the page as a string.
- `pacshop.app` holds `create_app`, `parse_product` and `parse_order`, which
  build a `Product` or `Order` from a decoded JSON object.

The data types `User`, `UserType`, `Product` and `Order` live in
`pacshop.models`, with `NoSuchUserError` raised for unknown user ids.

## What it does not do

All data lives in memory: nothing is saved, and every start of the server
begins again from the sample data. There are no logins; any user's pages are
served to whoever asks for that user's id.