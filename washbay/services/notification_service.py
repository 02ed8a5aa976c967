"""
Pickup notification for customers.

Builds the "your vehicle is ready" text with the service list and total,
and the WhatsApp click-to-chat link that carries it.
"""
import re
from datetime import datetime, timezone
from typing import Optional
from urllib.parse import quote
from zoneinfo import ZoneInfo

from washbay.config import Settings, get_settings
from washbay.schemas.report import display_amount
from washbay.schemas.vehicle import Vehicle as VehicleSchema, VehicleNotification

WHATSAPP_URL = "https://api.whatsapp.com/send"

TEMPLATES = {
    "en": {
        "greeting": "Hello {name},",
        "done": "We finished the service on your vehicle with plate {plate} at {time}.",
        "services": "Services:",
        "total": "Total: {amount}",
        "pickup": "Your vehicle is ready for pickup!",
        "thanks": "*{shop}* thanks you for your preference.",
    },
    "pt-BR": {
        "greeting": "Olá {name},",
        "done": "Finalizamos o serviço do seu veículo de placa {plate} agora as {time}.",
        "services": "Os serviços são:",
        "total": "Total: {amount}",
        "pickup": "Pode buscar seu veículo!",
        "thanks": "*{shop}* agradece pela sua preferência.",
    },
}


def phone_digits(phone: str) -> str:
    return re.sub(r"\D", "", phone or "")


def _money(settings: Settings, amount) -> str:
    return f"{settings.currency_symbol} {display_amount(amount)}"


def build_pickup_message(
    vehicle: VehicleSchema, now: Optional[datetime] = None, settings: Optional[Settings] = None
) -> str:
    settings = settings or get_settings()
    text = TEMPLATES.get(settings.locale, TEMPLATES["en"])
    now = now or datetime.now(timezone.utc)
    local_time = now.astimezone(ZoneInfo(settings.timezone)).strftime("%H:%M")

    lines = [
        text["greeting"].format(name=vehicle.customer_name),
        "",
        text["done"].format(plate=vehicle.license_plate, time=local_time),
        "",
        text["services"],
    ]
    lines.extend(f"{service.name} - {_money(settings, service.price)}" for service in vehicle.services)
    lines.append(text["total"].format(amount=_money(settings, vehicle.total_price)))
    lines.extend(["", text["pickup"], "", text["thanks"].format(shop=settings.shop_name)])
    if settings.shop_review_url:
        lines.append(settings.shop_review_url)

    return "\n".join(lines)


def build_notification(
    vehicle: VehicleSchema, now: Optional[datetime] = None, settings: Optional[Settings] = None
) -> VehicleNotification:
    settings = settings or get_settings()
    phone = f"{settings.whatsapp_country_code}{phone_digits(vehicle.customer_phone)}"
    message = build_pickup_message(vehicle, now, settings)
    link = f"{WHATSAPP_URL}?phone={phone}&text={quote(message)}"
    return VehicleNotification(phone=phone, message=message, link=link)
