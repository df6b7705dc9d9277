"""CLI commands, run against an in-memory or JSON-backed container."""

from click.testing import CliRunner

from storefront.infrastructure.bootstrap import build_container
from storefront.infrastructure.cli.main import cli
from storefront.infrastructure.config import Settings


def _invoke(container, *args):
    return CliRunner().invoke(cli, list(args), obj=container)


class TestProductCommands:

    def test_add_and_list(self, container):
        result = _invoke(container, "product", "add", "--name", "Widget", "--price", "9.99", "--stock", "5")
        assert result.exit_code == 0, result.output
        assert "'Widget' added at $9.99" in result.output

        listing = _invoke(container, "product", "list")
        assert "Widget" in listing.output
        assert "$9.99" in listing.output

    def test_list_empty(self, container):
        assert "No products found." in _invoke(container, "product", "list").output

    def test_add_invalid_price(self, container):
        result = _invoke(container, "product", "add", "--name", "Widget", "--price=-2", "--stock", "1")
        assert result.exit_code == 1
        assert "Money amount cannot be negative" in result.output

    def test_update_and_show(self, container):
        dto = container.product_service.create_product("Widget", "", 1, 1)
        result = _invoke(container, "product", "update", "--id", dto.id, "--stock", "8")
        assert result.exit_code == 0, result.output
        shown = _invoke(container, "product", "show", "--id", dto.id)
        assert "Stock:       8" in shown.output

    def test_update_without_fields(self, container):
        dto = container.product_service.create_product("Widget", "", 1, 1)
        result = _invoke(container, "product", "update", "--id", dto.id)
        assert result.exit_code == 2

    def test_delete_missing(self, container):
        result = _invoke(container, "product", "delete", "--id", "nope")
        assert result.exit_code == 1
        assert "Product not found" in result.output


class TestCartCommands:

    def test_add_update_summary_remove(self, container):
        dto = container.product_service.create_product("Widget", "", "2.50", 5)

        assert _invoke(container, "cart", "add", "--product-id", dto.id, "--quantity", "2").exit_code == 0
        assert _invoke(container, "cart", "update", "--product-id", dto.id, "--quantity", "4").exit_code == 0

        summary = _invoke(container, "cart", "summary")
        assert "Widget" in summary.output
        assert "$10.00" in summary.output

        assert _invoke(container, "cart", "remove", "--product-id", dto.id).exit_code == 0
        assert "Cart is empty." in _invoke(container, "cart", "list").output

    def test_not_enough_stock(self, container):
        dto = container.product_service.create_product("Widget", "", 1, 1)
        result = _invoke(container, "cart", "add", "--product-id", dto.id, "--quantity", "3")
        assert result.exit_code == 1
        assert "Not enough stock" in result.output


def test_json_backend_persists_between_invocations(tmp_path):
    settings = Settings(_env_file=None, storage_backend="json", data_dir=tmp_path)

    _invoke(build_container(settings), "product", "add", "--name", "Lamp", "--price", "30", "--stock", "2")
    listing = _invoke(build_container(settings), "product", "list")

    assert "Lamp" in listing.output


class TestDefaultContainer:
    """Invocations without a prebuilt container, as from the console script."""

    def _env(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("STOREFRONT_STORAGE_BACKEND", "json")
        monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path / "data"))
        monkeypatch.setenv("STOREFRONT_LOG_LEVEL", "INFO")

    def test_output_holds_only_command_output(self, monkeypatch, tmp_path):
        self._env(monkeypatch, tmp_path)

        result = CliRunner().invoke(cli, ["product", "list"])

        assert result.exit_code == 0, result.output
        assert result.output == "No products found.\n"

    def test_mutations_do_not_print_log_lines(self, monkeypatch, tmp_path):
        self._env(monkeypatch, tmp_path)

        result = CliRunner().invoke(
            cli, ["product", "add", "--name", "Lamp", "--price", "30", "--stock", "2"]
        )

        assert result.exit_code == 0, result.output
        assert result.output.count("\n") == 1
        assert result.output.startswith("Product ")
        assert result.output.endswith("'Lamp' added at $30.00\n")

    def test_verbose_flag_accepted(self, monkeypatch, tmp_path):
        self._env(monkeypatch, tmp_path)

        result = CliRunner().invoke(cli, ["--verbose", "product", "list"])

        assert result.exit_code == 0
        assert "No products found." in result.output
