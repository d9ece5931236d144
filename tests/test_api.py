import os
import tempfile
import unittest
from concurrent.futures import ThreadPoolExecutor
from datetime import date

from fastapi.testclient import TestClient
from support import make_settings

from retail_api.main import create_app


class ApiTestCase(unittest.TestCase):
    seed = True

    def setUp(self):
        app = create_app(make_settings(SEED_DEMO_DATA=self.seed))
        self.client = TestClient(app)
        self.client.__enter__()
        self.addCleanup(self.client.__exit__, None, None, None)


class SeededApiTest(ApiTestCase):
    def test_root_and_health(self):
        root = self.client.get("/")
        health = self.client.get("/health")

        self.assertEqual(root.status_code, 200)
        self.assertIn("/api/customers", root.json()["message"])
        self.assertEqual(health.status_code, 200)
        self.assertEqual(health.json()["status"], "ok")
        self.assertTrue(health.json()["database"])

    def test_create_customer_without_email(self):
        created = self.client.post(
            "/api/customers",
            json={"cust_id": "C010", "cust_name": "Test User"},
        )
        fetched = self.client.get("/api/customers/C010")

        self.assertEqual(created.status_code, 201)
        self.assertEqual(fetched.status_code, 200)
        self.assertEqual(fetched.json()["cust_name"], "Test User")
        self.assertIsNone(fetched.json()["email"])

    def test_customer_validation_errors(self):
        numeric_id = self.client.post("/api/customers", json={"cust_id": 10, "cust_name": "Test User"})
        missing_name = self.client.post("/api/customers", json={"cust_id": "C011"})
        empty_name = self.client.post("/api/customers", json={"cust_id": "C012", "cust_name": ""})
        bad_email = self.client.post(
            "/api/customers",
            json={"cust_id": "C013", "cust_name": "Test User", "email": "not-an-email"},
        )

        for response in (numeric_id, missing_name, empty_name, bad_email):
            self.assertEqual(response.status_code, 422)
        self.assertEqual(numeric_id.json()["detail"][0]["loc"], ["body", "cust_id"])

    def test_duplicate_customer_conflicts(self):
        response = self.client.post("/api/customers", json={"cust_id": "C001", "cust_name": "Copy"})

        self.assertEqual(response.status_code, 409)
        self.assertIn("C001", response.json()["detail"])

    def test_customer_search_and_paging(self):
        everyone = self.client.get("/api/customers")
        jaipur = self.client.get("/api/customers", params={"q": "jaipur"})
        first_page = self.client.get("/api/customers", params={"page": 1})
        bad_page = self.client.get("/api/customers", params={"page": 0})

        self.assertEqual([row["cust_id"] for row in everyone.json()], ["C001", "C002"])
        self.assertEqual([row["cust_id"] for row in jaipur.json()], ["C001"])
        self.assertEqual(len(first_page.json()), 2)
        self.assertEqual(bad_page.status_code, 422)

    def test_partial_update_keeps_other_fields(self):
        response = self.client.put("/api/customers/C001", json={"phone_no": "9000011111"})
        fetched = self.client.get("/api/customers/C001").json()

        self.assertEqual(response.status_code, 200)
        self.assertEqual(fetched["phone_no"], "9000011111")
        self.assertEqual(fetched["cust_name"], "Asha Kumar")
        self.assertEqual(fetched["email"], "asha@example.com")

    def test_update_and_delete_unknown_ids(self):
        update = self.client.put("/api/customers/C404", json={"cust_name": "Nobody"})
        delete = self.client.delete("/api/products/P404")
        fetch = self.client.get("/api/loans/L404")

        self.assertEqual(update.status_code, 404)
        self.assertEqual(delete.status_code, 404)
        self.assertEqual(fetch.status_code, 404)
        self.assertEqual(fetch.json()["detail"], "Loan not found")

    def test_sale_decrements_product_stock(self):
        response = self.client.post(
            "/api/sales",
            json={"sales_id": "SA002", "product_id": "P001", "quantity_sold": 3, "price_total": 750},
        )
        product = self.client.get("/api/products/P001").json()

        self.assertEqual(response.status_code, 201)
        self.assertIsNone(response.json()["invoice_id"])
        self.assertEqual(product["quantity_stock"], 17)

    def test_oversell_is_rejected(self):
        response = self.client.post(
            "/api/sales",
            json={"sales_id": "SA002", "product_id": "P002", "quantity_sold": 11, "price_total": 4950},
        )
        product = self.client.get("/api/products/P002").json()
        sale = self.client.get("/api/sales/SA002")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(product["quantity_stock"], 10)
        self.assertEqual(sale.status_code, 404)

    def test_sale_quantity_must_be_positive_integer(self):
        fractional = self.client.post(
            "/api/sales",
            json={"sales_id": "SA002", "product_id": "P001", "quantity_sold": 1.5, "price_total": 10},
        )
        zero = self.client.post(
            "/api/sales",
            json={"sales_id": "SA003", "product_id": "P001", "quantity_sold": 0, "price_total": 10},
        )

        self.assertEqual(fractional.status_code, 422)
        self.assertEqual(zero.status_code, 422)

    def test_stock_receipt_increments_product_stock(self):
        response = self.client.post(
            "/api/stock",
            json={"stock_id": "ST002", "supplier_id": "S001", "product_id": "P002", "quantity": 15},
        )
        product = self.client.get("/api/products/P002").json()

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["date_added"], date.today().isoformat())
        self.assertEqual(product["quantity_stock"], 25)

    def test_loan_payment_decrements_balance(self):
        response = self.client.post(
            "/api/payments",
            json={"pay_id": "PAY2", "loan_id": "L001", "amount_paid": 500},
        )
        loan = self.client.get("/api/loans/L001").json()

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["payment_mode"], "Cash")
        self.assertEqual(loan["balance"], 7500.0)

    def test_delete_supplier_in_use_conflicts(self):
        response = self.client.delete("/api/suppliers/S001")
        supplier = self.client.get("/api/suppliers/S001")

        self.assertEqual(response.status_code, 409)
        self.assertIn("FOREIGN KEY", response.json()["detail"])
        self.assertEqual(supplier.status_code, 200)

    def test_product_price_must_be_numeric(self):
        response = self.client.post(
            "/api/products",
            json={"product_id": "P010", "product_name": "Spanner", "price": "cheap"},
        )

        self.assertEqual(response.status_code, 422)

    def test_listings_carry_joined_names(self):
        products = self.client.get("/api/products").json()
        stock = self.client.get("/api/stock").json()

        self.assertEqual([row["product_name"] for row in products], ["Gadget B", "Widget A"])
        self.assertEqual({row["supplier_name"] for row in products}, {"Radha Supplies"})
        self.assertEqual(stock[0]["product_name"], "Widget A")

    def test_invoice_defaults(self):
        response = self.client.post(
            "/api/invoices",
            json={"invoice_id": "I002", "cust_id": "C002", "total_amt": 900},
        )

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["date"], date.today().isoformat())
        self.assertEqual(response.json()["payment_mode"], "Cash")
        self.assertEqual(self.client.get("/api/invoices").json()[0]["invoice_id"], "I002")

    def test_invoice_for_unknown_customer_conflicts(self):
        response = self.client.post(
            "/api/invoices",
            json={"invoice_id": "I002", "cust_id": "C404", "total_amt": 900},
        )

        self.assertEqual(response.status_code, 409)

    def test_new_loan_balance_defaults_to_amount(self):
        response = self.client.post(
            "/api/loans",
            json={"loan_id": "L002", "cust_id": "C001", "loan_amount": 2500},
        )
        loans = self.client.get("/api/loans").json()

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["balance"], 2500.0)
        self.assertEqual(response.json()["interest_rate"], 0.0)
        self.assertEqual([row["loan_id"] for row in loans], ["L002", "L001"])

    def test_summary(self):
        before = self.client.get("/api/summary").json()
        self.client.post("/api/payments", json={"pay_id": "PAY2", "loan_id": "L001", "amount_paid": 1000})
        after = self.client.get("/api/summary").json()

        self.assertEqual(
            before,
            {
                "totalCustomers": 2,
                "totalProducts": 2,
                "totalLoans": 1,
                "pendingPayments": 8000.0,
            },
        )
        self.assertEqual(after["pendingPayments"], 7000.0)

    def test_void_sale_restores_stock(self):
        response = self.client.delete("/api/sales/SA001")
        product = self.client.get("/api/products/P001").json()

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "deleted", "id": "SA001"})
        self.assertEqual(product["quantity_stock"], 22)

    def test_ledger_update_ignores_quantities(self):
        response = self.client.put(
            "/api/payments/P001",
            json={"payment_mode": "UPI", "amount_paid": 1},
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["payment_mode"], "UPI")
        self.assertEqual(response.json()["amount_paid"], 2000.0)


class EmptyApiTest(ApiTestCase):
    seed = False

    def test_empty_store(self):
        self.assertEqual(self.client.get("/api/customers").json(), [])
        self.assertEqual(self.client.get("/api/summary").json()["pendingPayments"], 0.0)



class ConcurrentWriteApiTest(unittest.TestCase):
    WRITERS = 40

    def setUp(self):
        workdir = tempfile.TemporaryDirectory()
        self.addCleanup(workdir.cleanup)
        database_url = "sqlite:///{}".format(os.path.join(workdir.name, "retail.db"))

        app = create_app(make_settings(DATABASE_URL=database_url))
        self.client = TestClient(app)
        self.client.__enter__()
        self.addCleanup(self.client.__exit__, None, None, None)

        self.client.post("/api/customers", json={"cust_id": "C001", "cust_name": "Asha Kumar"})
        self.client.post(
            "/api/products",
            json={"product_id": "P001", "product_name": "Rice 5kg", "quantity_stock": 1000},
        )
        self.client.post(
            "/api/loans",
            json={"loan_id": "L001", "cust_id": "C001", "loan_amount": 10.0},
        )

    def _post_all(self, path, bodies):
        def post(body):
            return self.client.post(path, json=body).status_code

        with ThreadPoolExecutor(max_workers=self.WRITERS) as pool:
            return list(pool.map(post, bodies))

    def test_parallel_sales_each_decrement_stock(self):
        bodies = [
            {"sales_id": "SA{:03d}".format(index), "product_id": "P001", "quantity_sold": 1, "price_total": 50}
            for index in range(self.WRITERS)
        ]

        statuses = self._post_all("/api/sales", bodies)
        product = self.client.get("/api/products/P001").json()

        self.assertEqual(statuses, [201] * self.WRITERS)
        self.assertEqual(product["quantity_stock"], 1000 - self.WRITERS)
        self.assertEqual(len(self.client.get("/api/sales").json()), self.WRITERS)

    def test_parallel_payments_each_reduce_balance(self):
        bodies = [
            {"pay_id": "PAY{:03d}".format(index), "loan_id": "L001", "amount_paid": 0.1}
            for index in range(self.WRITERS)
        ]

        statuses = self._post_all("/api/payments", bodies)
        loan = self.client.get("/api/loans/L001").json()

        self.assertEqual(statuses, [201] * self.WRITERS)
        self.assertAlmostEqual(loan["balance"], 10.0 - 0.1 * self.WRITERS, places=2)


if __name__ == "__main__":
    unittest.main()
