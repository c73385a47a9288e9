"""Tests for the Razorpay gateway adapter and its process-wide instance."""

import hashlib
import hmac
from unittest.mock import MagicMock

import pytest
import razorpay
import requests

from checkout.domain.errors import UpstreamError
from checkout.gateway import get_gateway
from checkout.gateway.razorpay_gateway import RazorpayGateway
from conftest import TEST_KEY_ID, TEST_SECRET, sign


class TestRazorpayGateway:
    def test_create_order_sends_request_and_maps_response(self, razorpay_client):
        gateway = RazorpayGateway(TEST_KEY_ID, TEST_SECRET, client=razorpay_client)
        order = gateway.create_order(5000, "INR", "rcpt_1", {"eventId": "e"})
        razorpay_client.order.create.assert_called_once_with(
            data={"amount": 5000, "currency": "INR", "receipt": "rcpt_1", "notes": {"eventId": "e"}}
        )
        assert order.order_id == "order_TEST123"
        assert order.amount == 5000
        assert order.receipt == "rcpt_1"

    @pytest.mark.parametrize(
        "error",
        [
            razorpay.errors.BadRequestError("The amount must be at least INR 1.00"),
            razorpay.errors.ServerError("upstream down"),
            requests.ConnectionError("connection refused"),
        ],
    )
    def test_sdk_errors_become_upstream_errors(self, error):
        client = MagicMock()
        client.order.create.side_effect = error
        gateway = RazorpayGateway(TEST_KEY_ID, TEST_SECRET, client=client)
        with pytest.raises(UpstreamError) as exc_info:
            gateway.create_order(100, "INR", "rcpt_1", {})
        assert exc_info.value.message.startswith("Payment Failed:")

    @pytest.mark.parametrize("key_id, secret", [("", TEST_SECRET), (TEST_KEY_ID, "")])
    def test_missing_keys_are_a_configuration_error(self, key_id, secret):
        with pytest.raises(UpstreamError) as exc_info:
            RazorpayGateway(key_id, secret)
        assert exc_info.value.message == "Server configuration error: Missing Keys"


class TestGetGateway:
    def test_gateway_is_built_once_per_credential_set(self):
        first = get_gateway()
        assert get_gateway() is first
        assert first.key_id == TEST_KEY_ID

    def test_new_credentials_get_a_new_gateway(self, razorpay_settings):
        first = get_gateway()
        razorpay_settings.RAZORPAY_KEY_ID = "rzp_test_other"
        assert get_gateway() is not first

    def test_missing_credentials_raise(self, razorpay_settings):
        razorpay_settings.RAZORPAY_KEY_SECRET = ""
        with pytest.raises(UpstreamError):
            get_gateway()


class TestConfigurationCheck:
    def test_check_reports_missing_keys(self, razorpay_settings):
        from checkout.checks import razorpay_credentials_check

        razorpay_settings.RAZORPAY_KEY_ID = ""
        [error] = razorpay_credentials_check(None)
        assert error.id == "checkout.E001"

    def test_check_passes_with_keys(self):
        from checkout.checks import razorpay_credentials_check

        assert razorpay_credentials_check(None) == []


def flip_bit(signature: str, index: int) -> str:
    raw = bytearray(bytes.fromhex(signature))
    raw[index // 8] ^= 1 << (index % 8)
    return raw.hex()


class TestVerifySignature:
    """Signature checks run through the SDK's own utility, no stubs."""

    @pytest.fixture
    def gateway(self) -> RazorpayGateway:
        return RazorpayGateway(TEST_KEY_ID, TEST_SECRET, client=razorpay.Client(auth=(TEST_KEY_ID, TEST_SECRET)))

    def test_signed_message_is_order_and_payment_joined_by_pipe(self):
        expected = hmac.new(b"k", b"order_1|pay_1", hashlib.sha256).hexdigest()
        assert sign("k", "order_1", "pay_1") == expected

    def test_genuine_signature_verifies(self, gateway):
        assert gateway.verify_signature("order_1", "pay_1", sign(TEST_SECRET, "order_1", "pay_1"))

    def test_tampered_signature_fails(self, gateway):
        good = sign(TEST_SECRET, "order_1", "pay_1")
        tampered = good[:-1] + ("0" if good[-1] != "0" else "1")
        assert not gateway.verify_signature("order_1", "pay_1", tampered)

    def test_wrong_secret_fails(self, gateway):
        assert not gateway.verify_signature("order_1", "pay_1", sign("other", "order_1", "pay_1"))

    def test_signature_is_bound_to_the_pair(self, gateway):
        good = sign(TEST_SECRET, "order_1", "pay_1")
        assert not gateway.verify_signature("order_1", "pay_2", good)
        assert not gateway.verify_signature("order_2", "pay_1", good)

    @pytest.mark.parametrize("bit", [0, 7, 100, 255])
    def test_any_flipped_bit_fails(self, gateway, bit):
        good = sign(TEST_SECRET, "order_1", "pay_1")
        assert not gateway.verify_signature("order_1", "pay_1", flip_bit(good, bit))

    @pytest.mark.parametrize("garbage", ["not hex at all", "", "ñandú"])
    def test_garbage_signature_fails(self, gateway, garbage):
        assert not gateway.verify_signature("order_1", "pay_1", garbage)
