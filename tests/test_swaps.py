"""Tests for the swap quote and transaction endpoints."""

import json

import httpx
import pytest

from tests.conftest import JUPITER_HOST, SOL_MINT, USDC_MINT, WALLET

QUOTE = {
    "inputMint": SOL_MINT,
    "outputMint": USDC_MINT,
    "inAmount": "1000000",
    "outAmount": "142370",
    "slippageBps": 50,
    "routePlan": [{"swapInfo": {"label": "Orca", "ammKey": "abc"}, "percent": 100}],
}


class TestSwapQuote:
    """Tests for GET /api/swap/quote."""

    @pytest.mark.asyncio
    async def test_quote_passthrough(self, client, respx_mock):
        """Test the upstream quote is returned unmodified."""
        route = respx_mock.get(host=JUPITER_HOST, path="/v6/quote").mock(
            return_value=httpx.Response(200, json=QUOTE)
        )

        response = await client.get(
            "/api/swap/quote",
            params={"inputMint": SOL_MINT, "outputMint": USDC_MINT, "amount": "1000000"},
        )

        assert response.status_code == 200
        assert response.json() == QUOTE

        params = route.calls.last.request.url.params
        assert params["inputMint"] == SOL_MINT
        assert params["outputMint"] == USDC_MINT
        assert params["amount"] == "1000000"
        assert params["slippageBps"] == "50"

    @pytest.mark.asyncio
    async def test_custom_slippage_forwarded(self, client, respx_mock):
        route = respx_mock.get(host=JUPITER_HOST, path="/v6/quote").mock(
            return_value=httpx.Response(200, json=QUOTE)
        )

        await client.get(
            "/api/swap/quote",
            params={
                "inputMint": SOL_MINT,
                "outputMint": USDC_MINT,
                "amount": "1000000",
                "slippageBps": "300",
            },
        )

        assert route.calls.last.request.url.params["slippageBps"] == "300"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "params",
        [
            {"outputMint": USDC_MINT, "amount": "1"},
            {"inputMint": SOL_MINT, "amount": "1"},
            {"inputMint": SOL_MINT, "outputMint": USDC_MINT},
            {"inputMint": SOL_MINT, "outputMint": USDC_MINT, "amount": ""},
            {},
        ],
    )
    async def test_missing_params_rejected_without_upstream_call(
        self, client, respx_mock, params
    ):
        """Test missing required parameters give 400 and never reach Jupiter."""
        response = await client.get("/api/swap/quote", params=params)

        assert response.status_code == 400
        assert response.json() == {
            "error": "Missing required parameters: inputMint, outputMint, amount"
        }
        assert len(respx_mock.calls) == 0

    @pytest.mark.asyncio
    async def test_upstream_error_is_400(self, client, respx_mock):
        """Test a Jupiter error field is surfaced as a client error."""
        respx_mock.get(host=JUPITER_HOST, path="/v6/quote").mock(
            return_value=httpx.Response(400, json={"error": "Could not find any route"})
        )

        response = await client.get(
            "/api/swap/quote",
            params={"inputMint": SOL_MINT, "outputMint": USDC_MINT, "amount": "1"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Could not find any route"}

    @pytest.mark.asyncio
    async def test_transport_failure_is_500(self, client, respx_mock):
        respx_mock.get(host=JUPITER_HOST, path="/v6/quote").mock(
            side_effect=httpx.ConnectTimeout("connect timed out")
        )

        response = await client.get(
            "/api/swap/quote",
            params={"inputMint": SOL_MINT, "outputMint": USDC_MINT, "amount": "1"},
        )

        assert response.status_code == 500
        assert response.json() == {"error": "connect timed out"}


class TestSwapTransaction:
    """Tests for POST /api/swap/transaction."""

    @pytest.mark.asyncio
    async def test_builds_unsigned_transaction(self, client, respx_mock):
        """Test the quote is posted to Jupiter and the transaction returned."""
        route = respx_mock.post(host=JUPITER_HOST, path="/v6/swap").mock(
            return_value=httpx.Response(
                200,
                json={"swapTransaction": "AQAAAA==", "lastValidBlockHeight": 123},
            )
        )

        response = await client.post(
            "/api/swap/transaction",
            json={"quoteResponse": QUOTE, "userPublicKey": WALLET},
        )

        assert response.status_code == 200
        assert response.json() == {"swapTransaction": "AQAAAA=="}

        sent = json.loads(route.calls.last.request.content)
        assert sent == {"quoteResponse": QUOTE, "userPublicKey": WALLET, "wrapAndUnwrapSol": True}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            {"userPublicKey": WALLET},
            {"quoteResponse": QUOTE},
            {"quoteResponse": None, "userPublicKey": WALLET},
            {},
        ],
    )
    async def test_missing_fields_rejected(self, client, respx_mock, body):
        response = await client.post("/api/swap/transaction", json=body)

        assert response.status_code == 400
        assert response.json() == {
            "error": "Missing required parameters: quoteResponse, userPublicKey"
        }
        assert len(respx_mock.calls) == 0

    @pytest.mark.asyncio
    async def test_empty_quote_object_forwarded(self, client, respx_mock):
        """Test an empty quote is left for Jupiter to judge."""
        route = respx_mock.post(host=JUPITER_HOST, path="/v6/swap").mock(
            return_value=httpx.Response(400, json={"error": "Invalid quoteResponse"})
        )

        response = await client.post(
            "/api/swap/transaction",
            json={"quoteResponse": {}, "userPublicKey": WALLET},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid quoteResponse"}
        assert json.loads(route.calls.last.request.content)["quoteResponse"] == {}

    @pytest.mark.asyncio
    async def test_missing_body_is_400(self, client, respx_mock):
        response = await client.post(
            "/api/swap/transaction",
            content=b"not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert "error" in response.json()

    @pytest.mark.asyncio
    async def test_upstream_error_message(self, client, respx_mock):
        """Test a response without a transaction surfaces Jupiter's error."""
        respx_mock.post(host=JUPITER_HOST, path="/v6/swap").mock(
            return_value=httpx.Response(422, json={"error": "Invalid quoteResponse"})
        )

        response = await client.post(
            "/api/swap/transaction",
            json={"quoteResponse": {"stale": True}, "userPublicKey": WALLET},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid quoteResponse"}

    @pytest.mark.asyncio
    async def test_generic_failure_message(self, client, respx_mock):
        """Test the fallback message when Jupiter gives no reason."""
        respx_mock.post(host=JUPITER_HOST, path="/v6/swap").mock(
            return_value=httpx.Response(200, json={})
        )

        response = await client.post(
            "/api/swap/transaction",
            json={"quoteResponse": QUOTE, "userPublicKey": WALLET},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Swap transaction failed"}
