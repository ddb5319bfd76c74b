"""
Moodboard PDF Generator
-----------------------
Renders a moodboard and its resolved layout into a paged PDF (the flipbook
source). Output depends only on the stored moodboard, its products and the
layout style, so re-rendering the same moodboard gives the same bytes.
"""

import io
from dataclasses import dataclass, field
from typing import List, Optional

from flask import current_app
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.utils import ImageReader, simpleSplit
from reportlab.pdfgen import canvas

from AuraBoard.services.errors import AssetMissing, RenderFailure
from AuraBoard.utils.asset_loader import AssetLoader
from AuraBoard.utils.moodboard_layout import GRID_COLUMNS, pack_layout_pages

MAGAZINE = "magazine"
STANDARD = "standard"
LAYOUT_STYLES = (MAGAZINE, STANDARD)

PAGE_SIZE = landscape(A4)
MARGIN = 36
GUTTER = 10
HEADER_HEIGHT = 40
CAPTION_HEIGHT = 18

INK = colors.HexColor("#0A1120")
PANEL = colors.HexColor("#1B2538")
ACCENT = colors.HexColor("#22D3EE")
MUTED = colors.HexColor("#94A3B8")
PAPER = colors.white


@dataclass
class RenderedDocument:
    pdf_bytes: bytes
    page_count: int
    layout_style: str
    share_token: str
    degraded_assets: List[str] = field(default_factory=list)

    @property
    def file_name(self):
        return f"moodboard_{self.share_token}.pdf"

    @property
    def size_kb(self):
        return round(len(self.pdf_bytes) / 1024, 1)


@dataclass(frozen=True)
class ProductRepresentation:
    images: list
    image_index: int
    finish_name: Optional[str] = None
    degraded: Optional[str] = None

    @property
    def image_reference(self):
        if 0 <= self.image_index < len(self.images):
            return self.images[self.image_index]
        return None


def resolve_layout_style(layout_style=None):
    """Known styles pass through; anything else becomes the configured default."""
    style = (layout_style or "").strip().lower()
    if style in LAYOUT_STYLES:
        return style
    default = (current_app.config.get("MOODBOARD_DEFAULT_LAYOUT") or MAGAZINE).lower()
    return default if default in LAYOUT_STYLES else MAGAZINE


def resolve_representation(item):
    """Pick base or finish-variant imagery for a selected product."""
    product = item.product
    selection = item.selection
    base_images = list(product.images or [])
    finish_index = selection.selected_finish_index

    if finish_index is None:
        return ProductRepresentation(base_images, selection.selected_image_index)

    variants = list(getattr(product, "variants", None) or [])
    if not 0 <= finish_index < len(variants):
        return ProductRepresentation(
            base_images,
            selection.selected_image_index,
            degraded=f"{product.id}: finish {finish_index} not available",
        )

    variant = variants[finish_index]
    return ProductRepresentation(
        list(variant.images or []) or base_images,
        selection.selected_image_index,
        finish_name=variant.finish_name,
    )


# =========================================================
# 🖨 RENDERER
# =========================================================
class MoodboardPDFRenderer:
    def __init__(self, moodboard, layout, layout_style=None, asset_loader=None, rows_per_page=None):
        cfg = current_app.config
        self.moodboard = moodboard
        self.layout = list(layout)
        self.layout_style = resolve_layout_style(layout_style)
        self.asset_loader = asset_loader or AssetLoader()
        self.rows_per_page = rows_per_page or cfg.get("MOODBOARD_GRID_ROWS_PER_PAGE", 4)
        self.company_name = cfg.get("COMPANY_NAME", "")
        self.tagline = cfg.get("COMPANY_TAGLINE", "")
        self.public_base_url = cfg.get("PUBLIC_BASE_URL", "")

        self.degraded_assets = []
        self._images = {}
        self._page_count = 0

    # ------------------------------------------------------
    # Entry point
    # ------------------------------------------------------
    def render(self):
        buffer = io.BytesIO()
        try:
            pdf = canvas.Canvas(buffer, pagesize=PAGE_SIZE, invariant=1)
            pdf.setTitle(self._title())
            pdf.setAuthor(self.company_name)
            pdf.setSubject(f"Moodboard {self.moodboard.share_token}")

            self._draw_cover(pdf)
            for placements in pack_layout_pages(self.layout, GRID_COLUMNS, self.rows_per_page):
                self._draw_grid_page(pdf, placements)
            if self.layout_style == MAGAZINE:
                for slot in self.layout:
                    self._draw_feature_page(pdf, slot.item)

            pdf.save()
        except RenderFailure:
            raise
        except Exception as e:
            raise RenderFailure(
                f"PDF engine failed for moodboard {self.moodboard.id}: {e}",
                moodboard_id=self.moodboard.id,
            ) from e

        return RenderedDocument(
            pdf_bytes=buffer.getvalue(),
            page_count=self._page_count,
            layout_style=self.layout_style,
            share_token=self.moodboard.share_token,
            degraded_assets=list(self.degraded_assets),
        )

    # ------------------------------------------------------
    # Pages
    # ------------------------------------------------------
    def _draw_cover(self, pdf):
        width, height = PAGE_SIZE
        mb = self.moodboard
        self._fill_background(pdf, INK)

        pdf.setFillColor(PAPER)
        pdf.setFont("Helvetica-Bold", 26)
        pdf.drawString(MARGIN, height - MARGIN - 24, self.company_name.upper())
        pdf.setFont("Helvetica", 11)
        pdf.setFillColor(ACCENT)
        pdf.drawString(MARGIN, height - MARGIN - 44, self.tagline)

        pdf.setFillColor(PAPER)
        pdf.setFont("Helvetica", 30)
        headline = simpleSplit(self._title(), "Helvetica", 30, width / 2 - MARGIN * 2)
        y = height / 2 + 40
        for line in headline[:3]:
            pdf.drawString(MARGIN, y, line)
            y -= 36

        pdf.setFont("Helvetica", 12)
        pdf.setFillColor(MUTED)
        client = mb.client_name or mb.user_name
        details = [
            f"Curated exclusively for {client}" if client else "Curated smart home solutions",
            mb.project_location or "",
            mb.created_at.strftime("%B %d, %Y") if mb.created_at else "",
        ]
        for line in filter(None, details):
            y -= 18
            pdf.drawString(MARGIN, y, line)

        pdf.setFont("Helvetica", 9)
        pdf.drawString(MARGIN, MARGIN, f"View online: {self.public_base_url}/view/{mb.share_token}")

        if self.layout:
            box = (width / 2, MARGIN, width / 2 - MARGIN, height - MARGIN * 2)
            self._draw_product_image(pdf, self.layout[0].item, box)

        self._end_page(pdf)

    def _draw_grid_page(self, pdf, placements):
        width, height = PAGE_SIZE
        self._fill_background(pdf, INK)
        self._draw_header(pdf, "The Collection")

        grid_top = height - MARGIN - HEADER_HEIGHT
        cell_w = (width - 2 * MARGIN - GUTTER * (GRID_COLUMNS - 1)) / GRID_COLUMNS
        cell_h = (grid_top - MARGIN - GUTTER * (self.rows_per_page - 1)) / self.rows_per_page

        for placement in placements:
            box_w = placement.column_span * cell_w + (placement.column_span - 1) * GUTTER
            box_h = placement.row_span * cell_h + (placement.row_span - 1) * GUTTER
            x = MARGIN + placement.column * (cell_w + GUTTER)
            y = grid_top - placement.row * (cell_h + GUTTER) - box_h

            item = placement.slot.item
            self._draw_product_image(pdf, item, (x, y + CAPTION_HEIGHT, box_w, box_h - CAPTION_HEIGHT))
            self._draw_caption(pdf, item, x, y + 4, box_w)

        self._end_page(pdf)

    def _draw_feature_page(self, pdf, item):
        width, height = PAGE_SIZE
        product = item.product
        rep = resolve_representation(item)
        self._fill_background(pdf, INK)
        self._draw_header(pdf, product.category or "Featured")

        top = height - MARGIN - HEADER_HEIGHT
        half = (width - 2 * MARGIN - GUTTER) / 2
        self._draw_product_image(pdf, item, (MARGIN, MARGIN, half, top - MARGIN))

        x = MARGIN + half + GUTTER * 2
        y = top - 20
        pdf.setFillColor(ACCENT)
        pdf.setFont("Helvetica", 10)
        pdf.drawString(x, y, (product.brand or "").upper())
        y -= 26
        pdf.setFillColor(PAPER)
        pdf.setFont("Helvetica-Bold", 20)
        pdf.drawString(x, y, product.name or "")
        if rep.finish_name:
            y -= 18
            pdf.setFont("Helvetica", 11)
            pdf.setFillColor(MUTED)
            pdf.drawString(x, y, f"Finish: {rep.finish_name}")

        pdf.setFont("Helvetica", 10)
        pdf.setFillColor(MUTED)
        for line in simpleSplit(product.description or "", "Helvetica", 10, half - GUTTER * 2)[:10]:
            y -= 14
            pdf.drawString(x, y, line)

        lifestyle = list(product.lifestyle_images or [])[:2]
        if lifestyle:
            thumb_w = (half - GUTTER * 3) / 2
            thumb_h = min(thumb_w * 0.75, y - MARGIN - GUTTER * 2)
            for i, ref in enumerate(lifestyle):
                if thumb_h <= 0:
                    break
                box = (x + i * (thumb_w + GUTTER), MARGIN, thumb_w, thumb_h)
                self._draw_image_reference(pdf, ref, box, product.name)

        self._end_page(pdf)

    # ------------------------------------------------------
    # Drawing helpers
    # ------------------------------------------------------
    def _fill_background(self, pdf, color):
        width, height = PAGE_SIZE
        pdf.setFillColor(color)
        pdf.rect(0, 0, width, height, stroke=0, fill=1)

    def _draw_header(self, pdf, title):
        width, height = PAGE_SIZE
        pdf.setFillColor(PAPER)
        pdf.setFont("Helvetica-Bold", 14)
        pdf.drawString(MARGIN, height - MARGIN - 14, title)
        pdf.setFillColor(MUTED)
        pdf.setFont("Helvetica", 9)
        pdf.drawRightString(width - MARGIN, height - MARGIN - 14, self._title())
        pdf.setStrokeColor(PANEL)
        pdf.line(MARGIN, height - MARGIN - 24, width - MARGIN, height - MARGIN - 24)

    def _draw_caption(self, pdf, item, x, y, box_w):
        product = item.product
        rep = resolve_representation(item)
        parts = [product.brand, product.name, rep.finish_name]
        caption = " / ".join(p for p in parts if p)
        pdf.setFillColor(MUTED)
        pdf.setFont("Helvetica", 8)
        lines = simpleSplit(caption, "Helvetica", 8, box_w)
        if lines:
            pdf.drawString(x, y, lines[0])

    def _draw_product_image(self, pdf, item, box):
        rep = resolve_representation(item)
        if rep.degraded:
            self._degrade(rep.degraded)

        reference = rep.image_reference
        if reference is None:
            self._degrade(
                f"{item.product.id}: image {rep.image_index} out of range ({len(rep.images)} images)"
            )
            self._draw_placeholder(pdf, box, item.product.name)
            return
        self._draw_image_reference(pdf, reference, box, item.product.name)

    def _draw_image_reference(self, pdf, reference, box, label):
        image = self._load_image(reference)
        if image is None:
            self._draw_placeholder(pdf, box, label)
            return

        x, y, w, h = box
        pdf.drawImage(image, x, y, width=w, height=h, preserveAspectRatio=True, anchor="c", mask="auto")

    def _draw_placeholder(self, pdf, box, label):
        x, y, w, h = box
        pdf.setFillColor(PANEL)
        pdf.setStrokeColor(MUTED)
        pdf.rect(x, y, w, h, stroke=1, fill=1)
        pdf.setFillColor(MUTED)
        pdf.setFont("Helvetica", 9)
        pdf.drawCentredString(x + w / 2, y + h / 2 + 4, "Image unavailable")
        lines = simpleSplit(label or "", "Helvetica", 9, w)
        if lines:
            pdf.drawCentredString(x + w / 2, y + h / 2 - 10, lines[0])

    def _load_image(self, reference):
        if reference in self._images:
            return self._images[reference]

        image = None
        try:
            data = self.asset_loader.load(reference)
            image = ImageReader(io.BytesIO(data))
            image.getSize()
        except AssetMissing as e:
            self._degrade(e.message)
            image = None
        except Exception as e:
            # undecodable image bytes
            self._degrade(f"Asset unavailable: {reference} ({e})")
            image = None

        self._images[reference] = image
        return image

    def _degrade(self, note):
        if note in self.degraded_assets:
            return
        self.degraded_assets.append(note)
        current_app.logger.warning(
            "[moodboard %s] degraded asset: %s", self.moodboard.share_token, note
        )

    def _end_page(self, pdf):
        pdf.showPage()
        self._page_count += 1

    def _title(self):
        return self.moodboard.project_name or "Your Vision of Modern Living"


def render_moodboard_pdf(moodboard, layout, layout_style=None, asset_loader=None):
    """Render the moodboard PDF. Raises RenderFailure if no document can be produced."""
    return MoodboardPDFRenderer(moodboard, layout, layout_style, asset_loader).render()
