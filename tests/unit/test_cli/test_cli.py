"""Tests for the translate-client CLI.

Testing approach:
- Uses Click's CliRunner for command invocation
- Injects an httpx.MockTransport through the context object, so no network
- Tests output and exit codes for success and error paths
"""

import json

from click.testing import CliRunner
import pytest

from translate_client.cli.main import cli
from translate_client.core.pagination import CursorCodec, PageFilter

# =============================================================================
# Test Fixtures
# =============================================================================


@pytest.fixture
def cli_runner():
    """Create Click CLI runner for testing commands."""
    return CliRunner()


def tx(tx_hash: str) -> dict:
    return {"chain": "eth", "rawTransactionData": {"transactionHash": tx_hash}}


def paged(items, next_url=None):
    return 200, {"items": items, "hasNextPage": next_url is not None, "nextPageUrl": next_url}


def stdout_lines(result) -> list[dict]:
    return [json.loads(line) for line in result.stdout.splitlines() if line.startswith("{")]


# =============================================================================
# cursor decode
# =============================================================================


@pytest.mark.unit
class TestCursorDecode:
    """Tests for `cursor decode`."""

    def test_decode_legacy_cursor(self, cli_runner):
        token = CursorCodec.encode({"pageSize": 10, "sort": "desc"})

        result = cli_runner.invoke(cli, ["cursor", "decode", token])

        assert result.exit_code == 0
        assert "Legacy cursor" in result.output
        assert json.loads(result.stdout) == {"pageSize": 10, "sort": "desc"}

    def test_decode_enhanced_cursor(self, cli_runner):
        history = [PageFilter(page_size=2), PageFilter(page_size=2, page_number=1)]
        token = CursorCodec().create_cursor(history, history[1], 1, current_index=1, next_filter=None)

        result = cli_runner.invoke(cli, ["cursor", "decode", token])

        assert result.exit_code == 0
        assert "Enhanced cursor: page 1" in result.output
        assert json.loads(result.stdout)["_cursorMeta"]["currentPageIndex"] == 1

    def test_decode_malformed_cursor(self, cli_runner):
        result = cli_runner.invoke(cli, ["cursor", "decode", "not-a-cursor"])

        assert result.exit_code == 1
        assert "Invalid cursor format" in result.output


# =============================================================================
# txs
# =============================================================================


@pytest.mark.unit
class TestTransactionsCommand:
    """Tests for `txs`."""

    def test_requires_api_key(self, cli_runner, make_transport):
        result = cli_runner.invoke(
            cli, ["txs", "evm", "eth", "0xabc"], obj={"transport": make_transport({})}
        )

        assert result.exit_code == 1
        assert "API key is required" in result.output

    def test_walks_requested_pages(self, cli_runner, make_transport):
        path = "/evm/eth/txs/0xabc"
        transport = make_transport(
            {
                path: [
                    paged([tx("0x1"), tx("0x2")], f"{path}?pageSize=2&ignoreTransactions=t1"),
                    paged([tx("0x3")], f"{path}?pageSize=2&ignoreTransactions=t2"),
                ]
            }
        )

        result = cli_runner.invoke(
            cli,
            ["txs", "evm", "eth", "0xabc", "--page-size", "2", "--pages", "2", "--api-key", "k"],
            obj={"transport": transport},
        )

        assert result.exit_code == 0, result.output
        hashes = [line["rawTransactionData"]["transactionHash"] for line in stdout_lines(result)]
        assert hashes == ["0x1", "0x2", "0x3"]
        assert "Next cursor:" in result.output
        assert len(transport.requests) == 2

    def test_resume_from_cursor(self, cli_runner, make_transport):
        path = "/evm/eth/txs/0xabc"
        transport = make_transport({path: paged([tx("0x9")])})
        cursor = CursorCodec.encode({"pageSize": 2, "ignoreTransactions": "t2"})

        result = cli_runner.invoke(
            cli,
            ["txs", "evm", "eth", "0xabc", "--cursor", cursor, "--api-key", "k"],
            obj={"transport": transport},
        )

        assert result.exit_code == 0, result.output
        assert transport.requests[0].url.params["ignoreTransactions"] == "t2"
        assert "No more pages" in result.output

    def test_api_error_exits_non_zero(self, cli_runner, make_transport):
        transport = make_transport({"/evm/eth/txs/0xabc": (401, {"message": "Unauthorized"})})

        result = cli_runner.invoke(
            cli, ["txs", "evm", "eth", "0xabc", "--api-key", "bad"], obj={"transport": transport}
        )

        assert result.exit_code == 1
        assert "Failed to fetch transactions" in result.output

    @pytest.mark.parametrize(
        "route",
        [
            (200, "<html>maintenance</html>"),
            paged([tx("0x1")], "/evm/eth/txs/0xabc?pageSize=lots"),
        ],
    )
    def test_unusable_response_exits_non_zero(self, cli_runner, make_transport, route):
        transport = make_transport({"/evm/eth/txs/0xabc": route})

        result = cli_runner.invoke(
            cli, ["txs", "evm", "eth", "0xabc", "--api-key", "k"], obj={"transport": transport}
        )

        assert result.exit_code == 1
        assert "Failed to fetch transactions" in result.output
        assert result.exception is None or isinstance(result.exception, SystemExit)

    def test_polkadot_transactions(self, cli_runner, make_transport):
        transport = make_transport(
            {
                "/polkadot/bittensor/txs/5Fxc": (
                    200,
                    {"items": [tx("0x1")], "nextPageSettings": {"hasNextPage": False, "nextPageUrl": None}},
                )
            }
        )

        result = cli_runner.invoke(
            cli,
            ["txs", "polkadot", "bittensor", "5Fxc", "--api-key", "k"],
            obj={"transport": transport},
        )

        assert result.exit_code == 0, result.output
        assert len(stdout_lines(result)) == 1

    def test_unknown_ecosystem_rejected(self, cli_runner):
        result = cli_runner.invoke(cli, ["txs", "xyz", "eth", "0xabc", "--api-key", "k"])

        assert result.exit_code == 2


# =============================================================================
# chains
# =============================================================================


@pytest.mark.unit
class TestChainsCommand:
    """Tests for `chains`."""

    def test_lists_chains(self, cli_runner, make_transport):
        transport = make_transport({"/svm/chains": (200, [{"name": "solana", "ecosystem": "svm"}])})

        result = cli_runner.invoke(
            cli, ["chains", "svm", "--api-key", "k"], obj={"transport": transport}
        )

        assert result.exit_code == 0, result.output
        assert stdout_lines(result)[0]["name"] == "solana"


def test_version(cli_runner):
    result = cli_runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "0.1.0" in result.output
