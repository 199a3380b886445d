"""Static promotional content for the landing page."""

from pydantic import BaseModel

from src.linkshort.config import DASHBOARD_PATH


class Feature(BaseModel):
    """A feature card in the features section."""

    title: str
    description: str
    icon: str


class CallToAction(BaseModel):
    """A button linking into the product."""

    label: str
    href: str


class LandingContent(BaseModel):
    """Everything the landing page shows."""

    badge: str
    headline: str
    headline_accent: str
    subheadline: str
    hero_cta: CallToAction
    features_heading: str
    features_subheading: str
    features: list[Feature]
    closing_heading: str
    closing_body: str
    closing_cta: CallToAction

    @property
    def calls_to_action(self) -> list[CallToAction]:
        return [self.hero_cta, self.closing_cta]


LANDING_CONTENT = LandingContent(
    badge="Fast, Simple, and Powerful",
    headline="Shorten Links,",
    headline_accent="Amplify Reach",
    subheadline=(
        "Transform long, unwieldy URLs into short, memorable links. "
        "Track performance, manage campaigns, and share with confidence."
    ),
    hero_cta=CallToAction(label="Get Started", href=DASHBOARD_PATH),
    features_heading="Everything You Need",
    features_subheading="Powerful features to manage, track, and optimize your links",
    features=[
        Feature(
            title="Quick Shortening",
            description="Convert long URLs into short, shareable links in seconds",
            icon="link-2",
        ),
        Feature(
            title="Analytics",
            description="Track clicks, locations, and engagement metrics in real-time",
            icon="bar-chart-3",
        ),
        Feature(
            title="Lightning Fast",
            description="Blazing fast redirects ensure your audience never waits",
            icon="zap",
        ),
        Feature(
            title="Secure & Reliable",
            description="Enterprise-grade security keeps your links safe and available",
            icon="shield",
        ),
    ],
    closing_heading="Ready to Get Started?",
    closing_body=(
        "Join thousands of users who trust our platform to manage their links. "
        "Sign up now and start shortening!"
    ),
    closing_cta=CallToAction(label="Create Your First Link", href=DASHBOARD_PATH),
)


def get_landing_content() -> LandingContent:
    """Return the landing page content."""
    return LANDING_CONTENT
