import pytest
from PIL import Image

from AuraBoard.app import create_app
from AuraBoard.config import TestingConfig
from AuraBoard.extensions import db
from AuraBoard.models import Product, ProductVariant
from AuraBoard.services.moodboard_service import create_moodboard

FIXTURE_IMAGES = {
    "wide.png": ((60, 30), "navy"),
    "tall.png": ((30, 60), "teal"),
    "square.png": ((40, 40), "gray"),
    "lifestyle.png": ((80, 50), "olive"),
    "brass.png": ((40, 40), "gold"),
}


@pytest.fixture
def asset_dir(tmp_path):
    products = tmp_path / "products"
    products.mkdir()
    for name, (size, color) in FIXTURE_IMAGES.items():
        Image.new("RGB", size, color).save(products / name)
    return tmp_path


@pytest.fixture
def app(asset_dir):
    app = create_app(TestingConfig)
    app.config["ASSET_FOLDER"] = str(asset_dir)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_product(app):
    def _make(name="Sentido 2-Button", orientation=None, aspect_ratio=None, images=None,
              variants=None, lifestyle_images=None, **fields):
        product = Product(
            name=name,
            brand=fields.pop("brand", "Basalte"),
            category=fields.pop("category", "Lighting Control"),
            description=fields.pop("description", "Elegant lighting control keypad"),
            images=images if images is not None else ["/attached_assets/products/square.png"],
            lifestyle_images=lifestyle_images or [],
            orientation=orientation,
            aspect_ratio=aspect_ratio,
            has_variants=bool(variants),
            **fields,
        )
        for position, (finish_name, finish_images) in enumerate(variants or []):
            product.variants.append(
                ProductVariant(finish_name=finish_name, images=finish_images, position=position)
            )
        db.session.add(product)
        db.session.commit()
        return product
    return _make


@pytest.fixture
def make_moodboard(app):
    def _make(products, selections=None, token_factory=None, **overrides):
        payload = {
            "userName": "Test User",
            "userEmail": "test@example.com",
            "userType": "homeowner",
            "projectName": "Test Project",
            "primaryInterests": ["Complete Automation"],
            "productData": selections if selections is not None else [
                {"productId": p.id, "selectedImageIndex": 0} for p in products
            ],
        }
        payload.update(overrides)
        return create_moodboard(payload, token_factory=token_factory)
    return _make
