"""
Moodboard Store
---------------
SQLAlchemy-backed persistence for moodboards and read access to the catalog.
Token uniqueness is enforced by the unique index on moodboard.share_token.
"""

from sqlalchemy.exc import IntegrityError

from AuraBoard.extensions import db
from AuraBoard.models import Moodboard, Product, SelectedProduct
from AuraBoard.services.errors import NotFound, TokenCollision


class MoodboardStore:

    def create(self, moodboard):
        token = moodboard.share_token
        db.session.add(moodboard)
        try:
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            if self._token_taken(token):
                raise TokenCollision(token)
            raise
        return moodboard

    def get_by_share_token(self, token):
        moodboard = Moodboard.query.filter_by(share_token=token).first()
        if moodboard is None:
            raise NotFound(f"Moodboard with share token {token} not found", share_token=token)
        return moodboard

    def get_by_id(self, moodboard_id):
        moodboard = db.session.get(Moodboard, str(moodboard_id))
        if moodboard is None:
            raise NotFound(f"Moodboard {moodboard_id} not found", moodboard_id=str(moodboard_id))
        return moodboard

    def get(self, ref):
        """Look up by id first, then by share token."""
        moodboard = db.session.get(Moodboard, str(ref))
        if moodboard is not None:
            return moodboard
        return self.get_by_share_token(ref)

    def list_products(self):
        return Product.query.order_by(Product.created_at, Product.name).all()

    def get_product(self, product_id):
        product = db.session.get(Product, str(product_id))
        if product is None:
            raise NotFound(f"Product {product_id} not found", product_id=str(product_id))
        return product

    def selected_products(self, moodboard):
        """Join the moodboard's stored selections with catalog products, in order."""
        return [
            SelectedProduct(selection, self.get_product(selection.product_id))
            for selection in moodboard.selections
        ]

    def _token_taken(self, token):
        return db.session.query(Moodboard.id).filter_by(share_token=token).first() is not None
