import io

import pytest
from PyPDF2 import PdfReader
from reportlab.pdfgen import canvas

from AuraBoard.models import ProductSelection, SelectedProduct
from AuraBoard.services.errors import RenderFailure
from AuraBoard.services.moodboard_service import render_moodboard
from AuraBoard.utils.moodboard_layout import resolve_moodboard_layout
from AuraBoard.utils.pdf_generator import (
    MAGAZINE,
    STANDARD,
    render_moodboard_pdf,
    resolve_layout_style,
    resolve_representation,
)

WIDE = "/attached_assets/products/wide.png"
TALL = "/attached_assets/products/tall.png"
SQUARE_IMG = "/attached_assets/products/square.png"


def page_count(document):
    return len(PdfReader(io.BytesIO(document.pdf_bytes)).pages)


@pytest.fixture
def three_products(make_product):
    return [
        make_product("Keypad", orientation="square", images=[SQUARE_IMG]),
        make_product("Sconce", orientation="portrait", images=[TALL],
                     lifestyle_images=["/attached_assets/products/lifestyle.png"]),
        make_product("Soundbar", orientation="landscape", images=[WIDE]),
    ]


def test_magazine_has_cover_grid_and_feature_pages(make_moodboard, three_products):
    moodboard = make_moodboard(three_products)
    document = render_moodboard(moodboard, MAGAZINE)

    assert document.pdf_bytes.startswith(b"%PDF")
    assert document.layout_style == MAGAZINE
    # cover + one grid page + one feature page per product
    assert document.page_count == 5
    assert page_count(document) == 5
    assert document.degraded_assets == []
    assert document.file_name == f"moodboard_{moodboard.share_token}.pdf"


def test_standard_style_skips_feature_pages(make_moodboard, three_products):
    document = render_moodboard(make_moodboard(three_products), STANDARD)
    assert document.page_count == 2
    assert page_count(document) == 2


def test_unknown_style_falls_back_to_default(app, make_moodboard, three_products):
    assert resolve_layout_style("brochure") == MAGAZINE
    assert resolve_layout_style(None) == MAGAZINE
    assert resolve_layout_style(" Standard ") == STANDARD

    app.config["MOODBOARD_DEFAULT_LAYOUT"] = STANDARD
    document = render_moodboard(make_moodboard(three_products), "brochure")
    assert document.layout_style == STANDARD


def test_out_of_range_image_index_renders_placeholder(make_product, make_moodboard):
    product = make_product("Keypad", orientation="landscape", images=[WIDE])
    moodboard = make_moodboard(
        [product], selections=[{"productId": product.id, "selectedImageIndex": 7}]
    )

    document = render_moodboard(moodboard, MAGAZINE)

    assert page_count(document) == document.page_count == 3
    assert len(document.degraded_assets) == 1
    assert "image 7 out of range" in document.degraded_assets[0]


def test_product_without_images_renders_placeholder(make_product, make_moodboard):
    product = make_product("Prototype", images=[])
    document = render_moodboard(make_moodboard([product]), STANDARD)
    assert document.page_count == 2
    assert document.degraded_assets


def test_missing_image_file_is_not_fatal(make_product, make_moodboard):
    product = make_product("Ghost", images=["/attached_assets/products/missing.png"])
    document = render_moodboard(make_moodboard([product]), MAGAZINE)
    assert document.page_count == 3
    assert any("missing.png" in note for note in document.degraded_assets)


def test_undecodable_image_is_not_fatal(asset_dir, make_product, make_moodboard):
    (asset_dir / "products" / "broken.png").write_bytes(b"not an image")
    product = make_product("Broken", images=["/attached_assets/products/broken.png"])
    document = render_moodboard(make_moodboard([product]), STANDARD)
    assert document.page_count == 2
    assert any("broken.png" in note for note in document.degraded_assets)


def test_finish_index_selects_variant_imagery(make_product, make_moodboard):
    product = make_product(
        "Sentido", images=[SQUARE_IMG],
        variants=[("Black Anodised", [SQUARE_IMG]), ("Brass", ["/attached_assets/products/brass.png"])],
    )
    selection = ProductSelection(product.id, 0, 1)
    rep = resolve_representation(SelectedProduct(selection, product))
    assert rep.finish_name == "Brass"
    assert rep.image_reference.endswith("brass.png")

    moodboard = make_moodboard([product], selections=[selection.to_dict()])
    assert render_moodboard(moodboard, MAGAZINE).degraded_assets == []


def test_missing_finish_index_uses_base_product(make_product):
    product = make_product("Sentido", images=[SQUARE_IMG], variants=[("Brass", ["x.png"])])
    rep = resolve_representation(SelectedProduct(ProductSelection(product.id, 0), product))
    assert rep.finish_name is None
    assert rep.image_reference == SQUARE_IMG


def test_out_of_range_finish_falls_back_to_base(make_product):
    product = make_product("Sentido", images=[SQUARE_IMG], variants=[("Brass", ["x.png"])])
    rep = resolve_representation(SelectedProduct(ProductSelection(product.id, 0, 4), product))
    assert rep.image_reference == SQUARE_IMG
    assert "finish 4" in rep.degraded


def test_rerender_is_byte_identical(make_moodboard, three_products):
    moodboard = make_moodboard(three_products)
    first = render_moodboard(moodboard, MAGAZINE)
    second = render_moodboard(moodboard, MAGAZINE)
    assert first.pdf_bytes == second.pdf_bytes


def test_render_does_not_touch_the_moodboard(make_moodboard, three_products):
    moodboard = make_moodboard(three_products)
    before = moodboard.to_dict()
    render_moodboard(moodboard, MAGAZINE)
    assert moodboard.to_dict() == before


def test_empty_moodboard_renders_cover_only(make_moodboard):
    moodboard = make_moodboard([])
    document = render_moodboard_pdf(moodboard, resolve_moodboard_layout([]), MAGAZINE)
    assert document.page_count == 1


def test_engine_failure_raises_render_failure(monkeypatch, make_moodboard, three_products):
    moodboard = make_moodboard(three_products)

    def broken_save(self):
        raise RuntimeError("engine unavailable")

    monkeypatch.setattr(canvas.Canvas, "save", broken_save)
    with pytest.raises(RenderFailure) as exc:
        render_moodboard(moodboard, MAGAZINE)
    assert exc.value.stage == "render"
