from sqlalchemy import func

from .extensions import db


class Respondent(db.Model):
    __tablename__ = "respondent"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    sex = db.Column(db.SmallInteger, nullable=False)    # 0 / 1
    grade = db.Column(db.SmallInteger, nullable=False)  # 0 / 4 / 5
    created_at = db.Column(db.DateTime, server_default=func.current_timestamp())

    answers = db.relationship("Answer", backref="respondent", lazy=True, passive_deletes=True)


class Question(db.Model):
    __tablename__ = "question"

    question_no = db.Column(db.Integer, primary_key=True, autoincrement=False)
    text_a = db.Column(db.String(255), nullable=False)
    text_b = db.Column(db.String(255), nullable=False)

    answers = db.relationship("Answer", backref="question", lazy=True, passive_deletes=True)

    def to_dict(self):
        return {"question_no": self.question_no, "text_a": self.text_a, "text_b": self.text_b}


class Answer(db.Model):
    __tablename__ = "answer"

    respondent_id = db.Column(
        db.Integer,
        db.ForeignKey("respondent.id", name="fk_ans_resp", ondelete="CASCADE"),
        primary_key=True,
        autoincrement=False,
    )
    question_no = db.Column(
        db.Integer,
        db.ForeignKey("question.question_no", name="fk_ans_q", ondelete="CASCADE"),
        primary_key=True,
        autoincrement=False,
    )
    value = db.Column(db.SmallInteger, nullable=False)
