import unittest
from datetime import datetime, timezone

from tests.factories import make_service, make_vehicle
from washbay.config import Settings
from washbay.services.notification_service import (
    WHATSAPP_URL,
    build_notification,
    build_pickup_message,
    phone_digits,
)


class TestPickupNotification(unittest.TestCase):

    def setUp(self):
        self.settings = Settings(
            locale="en",
            timezone="America/Sao_Paulo",
            currency_symbol="R$",
            shop_name="Bubbles",
            shop_review_url="https://example.com/review",
            whatsapp_country_code="55",
        )
        self.vehicle = make_vehicle(
            1,
            plate="ABC-1234",
            name="Ana Souza",
            phone="(11) 98765-4321",
            services=[make_service(1, "Wash", "15.00"), make_service(2, "Wax", "20.5")],
        )
        self.now = datetime(2024, 3, 15, 17, 30, tzinfo=timezone.utc)

    def test_phone_digits(self):
        self.assertEqual(phone_digits("(11) 98765-4321"), "11987654321")
        self.assertEqual(phone_digits(""), "")

    def test_message_lists_services_and_total(self):
        message = build_pickup_message(self.vehicle, self.now, self.settings)
        lines = message.split("\n")
        self.assertEqual(lines[0], "Hello Ana Souza,")
        self.assertIn("plate ABC-1234 at 14:30", message)
        self.assertIn("Wash - R$ 15.00", lines)
        self.assertIn("Wax - R$ 20.50", lines)
        self.assertIn("Total: R$ 35.50", lines)
        self.assertIn("*Bubbles* thanks you for your preference.", lines)
        self.assertEqual(lines[-1], "https://example.com/review")

    def test_portuguese_message(self):
        settings = self.settings.model_copy(update={"locale": "pt-BR", "shop_review_url": ""})
        message = build_pickup_message(self.vehicle, self.now, settings)
        self.assertTrue(message.startswith("Olá Ana Souza,"))
        self.assertIn("Pode buscar seu veículo!", message)
        self.assertFalse(message.endswith("\n"))

    def test_unknown_locale_falls_back_to_english(self):
        settings = self.settings.model_copy(update={"locale": "fr"})
        message = build_pickup_message(self.vehicle, self.now, settings)
        self.assertTrue(message.startswith("Hello"))

    def test_notification_link(self):
        notification = build_notification(self.vehicle, self.now, self.settings)
        self.assertEqual(notification.phone, "5511987654321")
        self.assertTrue(notification.link.startswith(f"{WHATSAPP_URL}?phone=5511987654321&text=Hello%20Ana"))
        self.assertNotIn("\n", notification.link)
        self.assertIn("%0A", notification.link)


if __name__ == "__main__":
    unittest.main()
