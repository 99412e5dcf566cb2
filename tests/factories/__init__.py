"""Helpers for test data generation.

Each ``create_*`` helper persists a model with realistic Faker values;
keyword arguments override any field.
"""

from decimal import Decimal
from io import BytesIO

from django.core.files.uploadedfile import SimpleUploadedFile
from faker import Faker
from PIL import Image

from core.auth.tokens import generate_access_token
from core.models import MenuItem, Restaurant, Review, User

fake = Faker()

DEFAULT_PASSWORD = "Str0ng!Passw0rd"


def create_user(password: str = DEFAULT_PASSWORD, **overrides) -> User:
    """Create a user with a usable password."""
    fields = {
        "email": fake.unique.email(),
        "display_name": fake.name()[:100],
    }
    fields.update(overrides)
    user = User(**fields)
    user.set_password(password)
    user.save()
    return user


def create_restaurant(created_by: User | None = None, **overrides) -> Restaurant:
    """Create a restaurant."""
    fields = {
        "name": fake.company()[:200],
        "address": fake.street_address(),
        "city": fake.city(),
        "state": fake.state_abbr(),
        "zip_code": fake.postcode(),
        "cuisine": fake.random_element(["Italian", "Mexican", "Thai", "Japanese"]),
        "price_range": fake.random_int(min=1, max=4),
        "created_by": created_by,
    }
    fields.update(overrides)
    return Restaurant.objects.create(**fields)


def create_menu_item(restaurant: Restaurant | None = None, **overrides) -> MenuItem:
    """Create a menu item, and a restaurant for it if none is given."""
    fields = {
        "restaurant": restaurant or create_restaurant(),
        "name": fake.word().title(),
        "description": fake.sentence(),
        "price": Decimal(str(fake.pydecimal(left_digits=2, right_digits=2, positive=True))),
        "category": fake.random_element(["Appetizer", "Main", "Dessert"]),
    }
    fields.update(overrides)
    return MenuItem.objects.create(**fields)


def create_review(
    menu_item: MenuItem | None = None,
    user: User | None = None,
    rating: int = 5,
    **overrides,
) -> Review:
    """Insert a review row directly, bypassing the rating aggregate."""
    fields = {
        "menu_item": menu_item or create_menu_item(),
        "user": user or create_user(),
        "rating": rating,
        "comment": fake.sentence(),
    }
    fields.update(overrides)
    return Review.objects.create(**fields)


def auth_header(user: User) -> dict[str, str]:
    """Authorization header carrying a valid token for ``user``."""
    token = generate_access_token(user.user_id, user.email, user.is_admin)
    return {"Authorization": f"Bearer {token}"}


def image_upload(
    name: str = "photo.png",
    image_format: str = "PNG",
    size: tuple[int, int] = (64, 48),
    content_type: str = "image/png",
    mode: str = "RGB",
) -> SimpleUploadedFile:
    """Build an in-memory image upload."""
    colors = {"RGB": (200, 80, 40), "RGBA": (200, 80, 40, 128)}
    buffer = BytesIO()
    Image.new(mode, size, color=colors.get(mode)).save(buffer, format=image_format)
    return SimpleUploadedFile(name, buffer.getvalue(), content_type=content_type)
