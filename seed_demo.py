#!/usr/bin/env python3
"""
Demo data for the Safety Suggestion Portal
Creates a few employees with suggestions and review comments for local development
"""

from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from app.database import Base, engine
from app.models import User, UserRole, Suggestion, SuggestionStatus, Comment
from app.utils.security import hash_password

DEMO_PASSWORD = "password123"

DEMO_USERS = [
    {"username": "safety.admin", "email": "safety.admin@company.com", "role": UserRole.ADMIN},
    {"username": "rajesh.kumar", "email": "rajesh.kumar@company.com", "role": UserRole.EMPLOYEE},
    {"username": "priya.sharma", "email": "priya.sharma@company.com", "role": UserRole.EMPLOYEE},
    {"username": "arjun.singh", "email": "arjun.singh@company.com", "role": UserRole.EMPLOYEE},
]

# (author, title, description, department, status, days ago)
DEMO_SUGGESTIONS = [
    ("rajesh.kumar", "Leak near loading bay", "Water pooling under the bay 3 roller door after rain.",
     "Warehouse", SuggestionStatus.UNDER_REVIEW, 2),
    ("priya.sharma", "Missing handrail", "The mezzanine stairs have no handrail on the left side.",
     "Production", SuggestionStatus.APPROVED, 9),
    ("arjun.singh", "Expired fire extinguisher", "Extinguisher by the server room was last inspected in 2022.",
     "IT", SuggestionStatus.IMPLEMENTED, 21),
    ("priya.sharma", "Poor lighting in car park", "Two lamps on level -1 have been out for a week.",
     None, SuggestionStatus.SUBMITTED, 0),
    ("rajesh.kumar", "Forklift speed signs", "Add speed limit signs along aisle C.",
     "Warehouse", SuggestionStatus.REJECTED, 35),
]

DEMO_COMMENTS = {
    "Leak near loading bay": [
        ("safety.admin", "Facilities will inspect the seal this week."),
        ("rajesh.kumar", "Thanks, it got worse overnight."),
    ],
    "Missing handrail": [
        ("safety.admin", "Approved, contractor booked."),
    ],
}

def seed_demo_data():
    Base.metadata.create_all(bind=engine)

    with Session(engine) as db:
        users = {}
        for user_data in DEMO_USERS:
            user = db.query(User).filter(User.email == user_data["email"]).first()
            if not user:
                user = User(password_hash=hash_password(DEMO_PASSWORD), **user_data)
                db.add(user)
                print(f"Created user: {user_data['username']} ({user_data['role'].value})")
            users[user_data["username"]] = user
        db.flush()

        now = datetime.utcnow()
        for author, title, description, department, status, days_ago in DEMO_SUGGESTIONS:
            if db.query(Suggestion).filter(Suggestion.title == title).first():
                continue
            created_at = now - timedelta(days=days_ago)
            suggestion = Suggestion(
                user_id=users[author].user_id,
                title=title,
                description=description,
                department=department,
                status=status,
                created_at=created_at,
                updated_at=created_at,
            )
            db.add(suggestion)
            db.flush()

            for offset, (commenter, text) in enumerate(DEMO_COMMENTS.get(title, []), start=1):
                db.add(Comment(
                    suggestion_id=suggestion.suggestion_id,
                    user_id=users[commenter].user_id,
                    comment_text=text,
                    created_at=created_at + timedelta(hours=offset),
                ))
            print(f"Created suggestion: {title} [{status.value}]")

        db.commit()

    print("=" * 50)
    print(f"Demo data ready. All demo accounts use password '{DEMO_PASSWORD}'.")

if __name__ == "__main__":
    seed_demo_data()
