from coachmarket.extensions import db

STATUS_PENDING = "pending"
STATUS_ACCEPTED = "accepted"
# no handler moves feedback here yet, the value is kept for schema compatibility
STATUS_REJECTED = "rejected"
FEEDBACK_STATUSES = (STATUS_PENDING, STATUS_ACCEPTED, STATUS_REJECTED)


class Feedback(db.Model):
    __tablename__ = "feedback"

    id = db.Column(db.Integer, primary_key=True)
    post_id = db.Column(db.Integer, db.ForeignKey("posts.id"), nullable=False)
    coach_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    comment = db.Column(db.Text, nullable=False)
    price_coins = db.Column(
        db.Integer,
        db.CheckConstraint("price_coins >= 0", name="ck_feedback_price_non_negative"),
        nullable=False,
    )
    status = db.Column(
        db.String(20),
        db.CheckConstraint(
            "status IN ('pending','accepted','rejected')", name="ck_feedback_status"
        ),
        nullable=False,
        default=STATUS_PENDING,
        server_default=STATUS_PENDING,
        index=True,
    )
    created_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())

    post = db.relationship("Post", back_populates="feedback")
    coach = db.relationship("User", back_populates="feedback_given")

    __table_args__ = (
        db.Index("idx_feedback_post_id", "post_id"),
        db.Index("idx_feedback_coach_id", "coach_id"),
    )

    def __repr__(self):
        return f"<Feedback {self.id}: {self.price_coins} coins - {self.status}>"

    @property
    def is_pending(self):
        return self.status == STATUS_PENDING
