from cvforge.extensions import db
from cvforge.models import User, CvDocument
from cvforge.services.sections import SECTIONS


def seed():
    print("🌱 Seeding CV documents...")

    user = User.query.filter_by(email="demo@example.com").first()
    if not user:
        print("⚠️ Demo user missing, run the user seeder first")
        return
    if CvDocument.query.filter_by(user_id=user.id).first():
        print("⚠️ CVs already seeded, skipping")
        return

    cv = CvDocument(user_id=user.id, title="Main CV", template="clean_navy", is_default=True)
    db.session.add(cv)
    db.session.flush()

    # every library item goes in, in library order
    for section in SECTIONS.values():
        model = section.item_model
        items = model.query.filter_by(user_id=user.id).order_by(model.created_at.asc()).all()
        for order, item in enumerate(items):
            db.session.add(section.inclusion_model(cv_id=cv.id, order=order, **{section.item_fk: item.id}))

    db.session.add(CvDocument(user_id=user.id, title="Data CV", template="clean_navy", is_default=False))
    db.session.commit()
    print("✅ CV documents seeded successfully!")
