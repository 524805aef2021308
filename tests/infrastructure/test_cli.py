"""CLI tests: commands run against a JSON data directory in tmp_path."""

import re
from uuid import uuid4

import pytest
from click.testing import CliRunner

from mockcommerce.infrastructure.cli.main import cli

UUID_RE = r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"


@pytest.fixture()
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("MOCKCOMMERCE_DATA_DIR", str(tmp_path / "data"))
    return CliRunner()


def _add_product(runner, seller_id):
    result = runner.invoke(cli, ["product", "add", "--name", "Widget", "--seller", str(seller_id)])
    assert result.exit_code == 0, result.output
    return re.search(UUID_RE, result.output).group(0)


def _create_order(runner, product_id, customer_id):
    result = runner.invoke(
        cli, ["order", "create", "--product", product_id, "--customer", str(customer_id)]
    )
    assert result.exit_code == 0, result.output
    return re.search(UUID_RE, result.output).group(0)


class TestProductCommands:

    def test_add_and_list(self, runner):
        product_id = _add_product(runner, uuid4())
        result = runner.invoke(cli, ["product", "list"])
        assert result.exit_code == 0
        assert product_id in result.output
        assert "Widget" in result.output

    def test_list_empty(self, runner):
        result = runner.invoke(cli, ["product", "list"])
        assert "No products found." in result.output


class TestOrderCommands:

    def test_create_show_status_delete(self, runner):
        product_id = _add_product(runner, uuid4())
        order_id = _create_order(runner, product_id, uuid4())

        shown = runner.invoke(cli, ["order", "show", "--id", order_id])
        assert shown.exit_code == 0
        assert "status=Pending" in shown.output
        assert "Widget" in shown.output

        updated = runner.invoke(cli, ["order", "status", "--id", order_id, "--set", " Shipped "])
        assert updated.exit_code == 0
        assert "'Shipped'" in updated.output

        deleted = runner.invoke(cli, ["order", "delete", "--id", order_id])
        assert deleted.exit_code == 0

        missing = runner.invoke(cli, ["order", "show", "--id", order_id])
        assert missing.exit_code != 0
        assert "ORDER_NOT_FOUND" in missing.output

    def test_create_for_unknown_product(self, runner):
        result = runner.invoke(
            cli, ["order", "create", "--product", str(uuid4()), "--customer", str(uuid4())]
        )
        assert result.exit_code != 0
        assert "PRODUCT_NOT_FOUND" in result.output

    def test_list_scopes(self, runner):
        seller = uuid4()
        customer = uuid4()
        product_id = _add_product(runner, seller)
        order_id = _create_order(runner, product_id, customer)

        for args in ([], ["--customer", str(customer)], ["--seller", str(seller)]):
            result = runner.invoke(cli, ["order", "list", *args])
            assert result.exit_code == 0
            assert order_id in result.output

        result = runner.invoke(cli, ["order", "list", "--customer", str(uuid4())])
        assert "No orders found." in result.output

    def test_list_rejects_both_scopes(self, runner):
        result = runner.invoke(
            cli, ["order", "list", "--customer", str(uuid4()), "--seller", str(uuid4())]
        )
        assert result.exit_code != 0

    def test_list_nil_customer(self, runner):
        result = runner.invoke(
            cli, ["order", "list", "--customer", "00000000-0000-0000-0000-000000000000"]
        )
        assert result.exit_code != 0
        assert "INVALID_CUSTOMER_ID" in result.output
