"""Demo record generation for GeoSentiment.

Produces raw records from a fixed pool of sample posts, placed in random
major cities over the last 30 days. Used by the CLI --demo mode and tests.
"""

from __future__ import annotations

import random
from datetime import datetime
from typing import List, Optional

from config.defaults import RANDOM_TIMESTAMP_DAYS
from geosentiment.models.records import RawRecord, Source
from geosentiment.utils.date_utils import random_recent_timestamp, utc_now
from geosentiment.utils.geo_utils import random_city

SAMPLE_TEXTS: List[str] = [
    "Just watched an amazing movie! Absolutely loved every minute of it. The acting was incredible and the story was so touching.",
    "Terrible traffic today. So frustrated with the constant delays. This city needs better infrastructure immediately.",
    "The weather is nice today. Going for a walk in the park. Nothing special happening, just enjoying the moment.",
    "Earthquake in the region has caused significant damage. Many people are worried about their safety and homes.",
    "Our team won the championship! This is the best day ever. So proud of everyone's hard work and dedication.",
    "Political situation is getting worse. People are angry about the new policies. Protests are happening everywhere.",
    "Concert was absolutely phenomenal tonight! The energy was incredible and the music was life-changing.",
    "Stock market crashed again. Investors are panicking and everyone is scared about the economic future.",
    "Beautiful sunset at the beach today. Feeling peaceful and grateful for these simple moments in life.",
    "Hospital staff are overwhelmed. The healthcare crisis continues to worsen and people are losing hope.",
    "New restaurant in town is absolutely fantastic! The food quality and service exceeded all expectations.",
    "Flight delayed for 6 hours. Airport is chaos and nobody knows what's happening. So frustrated right now.",
    "Kids graduation ceremony was perfect. So proud of their achievements and excited for their future.",
    "Local park cleanup was a huge success. Community came together and made a real difference today.",
    "Internet has been down all day. Can't work from home and losing productivity. This is so annoying.",
    "Breaking news: Major breakthrough in renewable energy technology announced by scientists today.",
    "Disappointed with the election results. Democracy seems to be failing us when we need it most.",
    "Incredible performance by the athletes at the Olympics. National pride is at an all-time high!",
    "Forest fires are spreading rapidly. Environmental destruction is heartbreaking to witness firsthand.",
    "New album release from my favorite artist! The music is absolutely divine and emotionally powerful.",
]


def _random_source(rng: random.Random) -> str:
    if rng.random() > 0.6:
        return Source.TWITTER
    return Source.NEWS if rng.random() > 0.5 else Source.UPLOAD


def generate_demo_records(
    count: int = 100,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> List[RawRecord]:
    """Generate ``count`` raw demo records.

    Args:
        count: Number of records.
        rng: Random source (seed it for reproducible output).
        now: Reference instant for the 30-day timestamp window.
    """
    rng = rng or random.Random()
    now = now or utc_now()
    return [
        RawRecord(
            text=rng.choice(SAMPLE_TEXTS),
            timestamp=random_recent_timestamp(RANDOM_TIMESTAMP_DAYS, rng=rng, now=now),
            location=random_city(rng),
            source=_random_source(rng),
        )
        for _ in range(max(count, 0))
    ]
