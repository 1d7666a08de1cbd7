from datetime import datetime, timedelta, timezone

from social_scheduler.database import SessionLocal, init_db
from social_scheduler.models import AnalyticsRecord, Post, Schedule

# Create tables
init_db()

db = SessionLocal()

# Clear existing data (children first in case foreign keys are off)
db.query(AnalyticsRecord).delete()
db.query(Schedule).delete()
db.query(Post).delete()

now = datetime.now(timezone.utc)

# Sample posts
posts = [
    Post(content="Big news dropping Friday. Stay tuned!", created_at=now, updated_at=now),
    Post(
        content="Behind the scenes of our spring shoot",
        media_url="https://example.com/media/spring-shoot.jpg",
        created_at=now,
        updated_at=now,
    ),
    Post(content="Thanks for 10k followers!", created_at=now, updated_at=now),
]
db.add_all(posts)
db.flush()

# Sample schedules
schedules = [
    Schedule(post_id=posts[0].id, platform="twitter", scheduled_time=now + timedelta(days=2)),
    Schedule(post_id=posts[1].id, platform="instagram", scheduled_time=now - timedelta(days=1),
             status="published", published_at=now - timedelta(days=1)),
    Schedule(post_id=posts[2].id, platform="facebook", scheduled_time=now - timedelta(days=3),
             status="published", published_at=now - timedelta(days=3)),
    Schedule(post_id=posts[2].id, platform="twitter", scheduled_time=now - timedelta(days=3),
             status="failed"),
]
db.add_all(schedules)
db.flush()

# Sample analytics for the published schedules
analytics = [
    AnalyticsRecord(schedule_id=schedules[1].id, platform="instagram",
                    likes=340, shares=25, comments=41, views=5200, clicks=88),
    AnalyticsRecord(schedule_id=schedules[2].id, platform="facebook",
                    likes=120, shares=14, comments=9, views=2100, clicks=35),
]
for record in analytics:
    record.recompute_engagement_rate()
db.add_all(analytics)
db.commit()

print("Database seeded successfully!")
print(f"  - {len(posts)} posts")
print(f"  - {len(schedules)} schedules")
print(f"  - {len(analytics)} analytics records")

db.close()
