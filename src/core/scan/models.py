"""Data models for the website social-presence scan."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class Platform(Enum):
    INSTAGRAM = "Instagram"
    FACEBOOK = "Facebook"
    LINKEDIN = "LinkedIn"
    TWITTER = "Twitter"
    X = "X"
    TIKTOK = "TikTok"
    YOUTUBE = "YouTube"
    PINTEREST = "Pinterest"
    GOOGLE_BUSINESS = "Google Business"


class Tone(Enum):
    PROFESSIONAL = "Professional"
    CASUAL = "Casual/Friendly"
    PLAYFUL = "Playful"
    NEUTRAL = "Neutral"


@dataclass(frozen=True)
class PlatformLink:
    platform: Platform
    url: str

    def to_dict(self) -> Dict[str, str]:
        return {"platform": self.platform.value, "url": self.url}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlatformLink":
        return cls(platform=Platform(data["platform"]), url=data["url"])


@dataclass(frozen=True)
class WebsiteMetadata:
    hero_text: str = ""
    tagline: str = ""
    meta_description: str = ""
    og_description: str = ""
    dominant_colors: List[str] = field(default_factory=list)
    detected_tone: Tone = Tone.NEUTRAL

    def to_dict(self) -> Dict[str, Any]:
        return {
            "heroText": self.hero_text,
            "tagline": self.tagline,
            "metaDescription": self.meta_description,
            "ogDescription": self.og_description,
            "dominantColors": list(self.dominant_colors),
            "detectedTone": self.detected_tone.value,
        }


@dataclass
class DiscoveryResult:
    """What a website scan found before any LLM analysis."""
    url: str
    business_name: str
    platforms: List[PlatformLink]
    website_data: WebsiteMetadata

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self.url,
            "businessName": self.business_name,
            "platforms": [p.to_dict() for p in self.platforms],
            "websiteData": self.website_data.to_dict(),
        }


@dataclass
class PlatformAnalysis:
    name: str
    url: str
    score: int
    good: List[str] = field(default_factory=list)
    bad: List[str] = field(default_factory=list)
    reflect: List[str] = field(default_factory=list)
    quick_win: str = ""
    handle: Optional[str] = None
    metrics: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": self.name,
            "url": self.url,
            "score": self.score,
            "checkmarks": {
                "good": list(self.good),
                "bad": list(self.bad),
                "reflect": list(self.reflect),
            },
            "quickWin": self.quick_win,
        }
        if self.handle:
            data["handle"] = self.handle
        if self.metrics:
            data["metrics"] = dict(self.metrics)
        return data


@dataclass
class SocialAnalysis:
    url: str
    business_name: str
    overall_score: int
    overall_insight: str
    detected_positioning: str
    detected_tone: str
    visual_consistency: str
    platforms: List[PlatformAnalysis]
    missing_platforms: List[str]
    alignment_score: Optional[int] = None
    alignment_insight: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self.url,
            "businessName": self.business_name,
            "overallScore": self.overall_score,
            "overallInsight": self.overall_insight,
            "detectedPositioning": self.detected_positioning,
            "detectedTone": self.detected_tone,
            "visualConsistency": self.visual_consistency,
            "platforms": [p.to_dict() for p in self.platforms],
            "missingPlatforms": list(self.missing_platforms),
            "alignmentScore": self.alignment_score,
            "alignmentInsight": self.alignment_insight,
        }
