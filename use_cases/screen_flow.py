"""Screen routing and static screen content for the presentation layer."""

from dataclasses import dataclass

from use_cases.session_models import Screen

ONBOARDING_PAGES = (
    ("Welcome!", "Discover great features."),
    ("Personalize", "Customize your experience."),
    ("Get Started", "Enjoy using the app!"),
)


@dataclass(frozen=True)
class HomeTab:
    key: str
    label: str
    heading: str
    blurb: str


HOME_TABS = (
    HomeTab("home", "🏠 Home", "Welcome to PeronoAI",
            "Your personalized dashboard shows your progress and recommendations."),
    HomeTab("lessons", "📖 Lessons", "Lessons",
            "Access your structured lessons and track your learning progress."),
    HomeTab("profile", "👤 Profile", "Profile",
            "Manage your account and update your preferences."),
)


def select_screen(derived: Screen, auth_requested: bool) -> Screen:
    """Auth is navigation-only: reachable from Welcome, never derived from flags."""
    if derived == Screen.WELCOME and auth_requested:
        return Screen.AUTH
    return derived


def clamp_onboarding_page(page: int) -> int:
    return max(0, min(page, len(ONBOARDING_PAGES) - 1))


def is_last_onboarding_page(page: int) -> bool:
    return clamp_onboarding_page(page) == len(ONBOARDING_PAGES) - 1
