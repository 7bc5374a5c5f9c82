from coachmarket.extensions import db


class Post(db.Model):
    __tablename__ = "posts"

    id = db.Column(db.Integer, primary_key=True)
    athlete_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    video_url = db.Column(db.Text, nullable=False)
    description = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())

    athlete = db.relationship("User", back_populates="posts")
    feedback = db.relationship(
        "Feedback", back_populates="post", lazy="dynamic", order_by="Feedback.id"
    )

    __table_args__ = (
        db.Index("idx_posts_athlete_id", "athlete_id"),
    )

    def __repr__(self):
        return f"<Post {self.id} by athlete {self.athlete_id}>"
