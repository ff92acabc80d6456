PAYMENT = {
    "paymentData": {
        "cardNumber": "4242 4242 4242 4242",
        "expiryDate": "12/99",
        "cvv": "123",
        "cardHolder": "Jane Doe",
        "billingAddress": {
            "address": "1 Ocean Drive",
            "city": "Malibu",
            "state": "CA",
            "zipCode": "90265",
        },
    },
    "bookingData": {
        "checkinDate": "2025-07-01",
        "checkoutDate": "2025-07-04",
        "guests": 4,
        "guestName": "Jane Doe",
        "guestEmail": "jane@luxestay.com",
    },
}


class TestProcessPaymentApi:
    def test_payment_confirms_booking(self, call_api, notifier):
        status, body = call_api("POST", "/api/process-payment", PAYMENT)

        assert status == 200
        assert body["success"] is True
        assert body["message"] == "Payment processed successfully"
        assert body["paymentId"].startswith("pay_")
        assert body["booking"]["status"] == "confirmed"
        assert body["booking"]["totalAmount"] == "2907.00"
        notifier.notify.assert_called_once()

        _, stored = call_api("GET", f"/api/bookings/{body['booking']['id']}")
        assert stored["status"] == "confirmed"

    def test_invalid_card_creates_nothing(self, call_api, notifier):
        payload = {
            **PAYMENT,
            "paymentData": {**PAYMENT["paymentData"], "cardNumber": "4242"},
        }

        status, body = call_api("POST", "/api/process-payment", payload)

        assert status == 400
        assert [e["field"] for e in body["errors"]] == ["paymentData.cardNumber"]
        notifier.notify.assert_not_called()
        assert call_api("GET", "/api/bookings")[1] == []

    def test_expiry_typed_without_slash_is_accepted(self, call_api):
        payload = {
            **PAYMENT,
            "paymentData": {**PAYMENT["paymentData"], "expiryDate": "1299"},
        }

        status, body = call_api("POST", "/api/process-payment", payload)

        assert status == 200
        assert body["booking"]["status"] == "confirmed"
