# sdk/product_client.py
import argparse
import os

import requests
import httpx
from typing import Any, Dict, Optional


class ProductAPIClientError(Exception):
    def __init__(self, status_code: int, body: Any):
        self.status_code = status_code
        self.body = body
        message = body.get("message") if isinstance(body, dict) else body
        super().__init__(f"HTTP {status_code}: {message}")


def _decode(r) -> Any:
    try:
        body = r.json()
    except ValueError:
        body = r.text
    if r.status_code >= 400:
        raise ProductAPIClientError(r.status_code, body)
    return body


class ProductClient:
    """Thin wrapper over the product endpoints.

    ``session`` defaults to a ``requests.Session``; anything exposing the same
    ``get/post/put/delete`` API (e.g. a Starlette ``TestClient``) works too.
    ``transport`` is handed to ``httpx.AsyncClient`` for the async helpers.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        token: Optional[str] = None,
        timeout: int = 10,
        session=None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.transport = transport
        self.token = None
        if token:
            self.set_token(token)

    def set_token(self, token: str) -> None:
        self.token = token
        self.session.headers.update({"Authorization": f"Bearer {token}"})

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    # Products
    def welcome(self) -> str:
        r = self.session.get(self._url("/"), timeout=self.timeout)
        if r.status_code >= 400:
            raise ProductAPIClientError(r.status_code, r.text)
        return r.text

    def list_products(self):
        r = self.session.get(self._url("/api/products"), timeout=self.timeout)
        return _decode(r)

    def get_product(self, product_id: str):
        r = self.session.get(self._url(f"/api/products/{product_id}"), timeout=self.timeout)
        return _decode(r)

    def create_product(self, name: str, description: str, price: float, category: str, in_stock: Optional[bool] = None):
        payload: Dict[str, Any] = {
            "name": name, "description": description, "price": price, "category": category
        }
        if in_stock is not None:
            payload["inStock"] = in_stock
        r = self.session.post(self._url("/api/products"), json=payload, timeout=self.timeout)
        return _decode(r)

    def update_product(self, product_id: str, **fields):
        # accepts in_stock as a python-style alias for inStock
        if "in_stock" in fields:
            fields["inStock"] = fields.pop("in_stock")
        r = self.session.put(self._url(f"/api/products/{product_id}"), json=fields, timeout=self.timeout)
        return _decode(r)

    def delete_product(self, product_id: str):
        r = self.session.delete(self._url(f"/api/products/{product_id}"), timeout=self.timeout)
        return _decode(r)

    # Async helpers
    def _async_client(self) -> httpx.AsyncClient:
        headers = {"Authorization": f"Bearer {self.token}"} if self.token else {}
        return httpx.AsyncClient(base_url=self.base_url, headers=headers, timeout=self.timeout, transport=self.transport)

    async def list_products_async(self):
        async with self._async_client() as client:
            r = await client.get("/api/products")
            return _decode(r)

    async def get_product_async(self, product_id: str):
        async with self._async_client() as client:
            r = await client.get(f"/api/products/{product_id}")
            return _decode(r)

    async def create_product_async(self, name: str, description: str, price: float, category: str, in_stock: Optional[bool] = None):
        payload: Dict[str, Any] = {
            "name": name, "description": description, "price": price, "category": category
        }
        if in_stock is not None:
            payload["inStock"] = in_stock
        async with self._async_client() as client:
            r = await client.post("/api/products", json=payload)
            return _decode(r)


def _in_stock_arg(value: str) -> bool:
    if value.lower() in ("true", "yes", "y", "1"):
        return True
    if value.lower() in ("false", "no", "n", "0"):
        return False
    raise argparse.ArgumentTypeError(f"expected true/false, got {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Product API client")
    parser.add_argument("--url", default=os.environ.get("PRODUCT_API_URL", "http://127.0.0.1:3000"))
    parser.add_argument("--token", default=os.environ.get("PRODUCT_API_TOKEN"))
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list-products", help="List all products")

    gp = subparsers.add_parser("get-product", help="Get a product by its ID")
    gp.add_argument("--product-id", required=True)

    cp = subparsers.add_parser("create-product", help="Create a new product")
    cp.add_argument("--name", required=True)
    cp.add_argument("--description", required=True)
    cp.add_argument("--price", type=float, required=True)
    cp.add_argument("--category", required=True)
    cp.add_argument("--in-stock", type=_in_stock_arg)

    up = subparsers.add_parser("update-product", help="Update fields of a product")
    up.add_argument("--product-id", required=True)
    up.add_argument("--name")
    up.add_argument("--description")
    up.add_argument("--price", type=float)
    up.add_argument("--category")
    up.add_argument("--in-stock", type=_in_stock_arg)

    dp = subparsers.add_parser("delete-product", help="Delete a product")
    dp.add_argument("--product-id", required=True)
    return parser


def run_command(c: ProductClient, args: argparse.Namespace):
    if args.command == "list-products":
        return c.list_products()
    elif args.command == "get-product":
        return c.get_product(args.product_id)
    elif args.command == "create-product":
        return c.create_product(args.name, args.description, args.price, args.category, args.in_stock)
    elif args.command == "update-product":
        fields = {
            k: getattr(args, k)
            for k in ("name", "description", "price", "category", "in_stock")
            if getattr(args, k) is not None
        }
        return c.update_product(args.product_id, **fields)
    elif args.command == "delete-product":
        return c.delete_product(args.product_id)


if __name__ == "__main__":
    from rich import print

    args = build_parser().parse_args()
    c = ProductClient(base_url=args.url, token=args.token)
    try:
        print(run_command(c, args))
    except ProductAPIClientError as e:
        print(f"[red]{e}[/red]")
