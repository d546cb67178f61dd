"""Smoke run of the cart flow against a running server (python seed_data.py first)."""
import requests
import json

BASE_URL = "http://localhost:8000/api/v1"
EMAIL = "verify_cart@example.com"
PASSWORD = "SecurePassword123"
ADDRESS = "221B Baker Street, Marylebone, London NW1 6XE"

def print_response(name, response):
    print(f"--- {name} ---")
    print(f"Status: {response.status_code}")
    try:
        print(json.dumps(response.json(), indent=2))
    except ValueError:
        print(response.text)
    print("\n")

def run_verification():
    # 1. Register (falls back to login if the user already exists)
    print("1. Registering User...")
    resp = requests.post(f"{BASE_URL}/auth/register", json={
        "name": "Verify Cart",
        "email": EMAIL,
        "password": PASSWORD
    })
    print_response("Register", resp)
    if resp.status_code != 201:
        resp = requests.post(f"{BASE_URL}/auth/login", json={"email": EMAIL, "password": PASSWORD})
        print_response("Login", resp)
    if resp.status_code not in (200, 201):
        print("Authentication failed, aborting.")
        return
    body = resp.json()
    user_id = body["user"]["id"]
    headers = {"Authorization": f"Bearer {body['access_token']}"}

    # 2. Set a shipping address
    print("2. Setting address...")
    resp = requests.put(f"{BASE_URL}/users/{user_id}", headers=headers, json={"address": ADDRESS})
    print_response("Set Address", resp)

    # 3. Pick products
    resp = requests.get(f"{BASE_URL}/products/")
    products = resp.json()
    if len(products) < 2:
        print("Need at least two products, run seed_data.py first.")
        return

    # 4. Add, update, remove
    print("3. Adding to cart...")
    resp = requests.post(f"{BASE_URL}/cart/", headers=headers, json={"productId": products[0]["id"], "quantity": 1})
    print_response("Add Product", resp)
    resp = requests.post(f"{BASE_URL}/cart/", headers=headers, json={"productId": products[1]["id"], "quantity": 1})
    print_response("Add Second Product", resp)

    print("4. Updating quantity...")
    resp = requests.put(f"{BASE_URL}/cart/", headers=headers, json={"productId": products[0]["id"], "quantity": 2})
    print_response("Update Product", resp)

    print("5. Removing product...")
    resp = requests.delete(f"{BASE_URL}/cart/{products[1]['id']}", headers=headers)
    print(f"Delete Product status: {resp.status_code}\n")

    # 5. Checkout
    print("6. Checking out...")
    resp = requests.post(f"{BASE_URL}/cart/checkout", headers=headers)
    print(f"Checkout status: {resp.status_code}\n")
    if resp.status_code != 204:
        print_response("Checkout", resp)

    resp = requests.get(f"{BASE_URL}/users/{user_id}", headers=headers)
    print_response("User After Checkout", resp)
    resp = requests.get(f"{BASE_URL}/cart/", headers=headers)
    print_response("Cart After Checkout", resp)

if __name__ == "__main__":
    run_verification()
