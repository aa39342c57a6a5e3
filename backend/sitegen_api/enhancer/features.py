"""Comprehensive feature catalogue rendered into generation prompts"""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class WebsiteFeature:
    name: str
    description: str
    html_elements: List[str]
    css_requirements: List[str]
    js_implementation: List[str]
    estimated_lines: int


COMPREHENSIVE_FEATURES: List[WebsiteFeature] = [
    WebsiteFeature(
        name="Advanced Navigation System",
        description="Multi-level navigation with mobile menu, search, and user account",
        html_elements=[
            "Navigation bar with logo",
            "Primary menu items",
            "Dropdown submenus",
            "Search bar with autocomplete",
            "User account menu",
            "Mobile hamburger menu",
            "Breadcrumb navigation",
        ],
        css_requirements=[
            "Sticky header styling",
            "Dropdown animations",
            "Mobile menu transitions",
            "Search bar styling",
            "Hover and focus states",
            "Active page indicators",
        ],
        js_implementation=[
            "Mobile menu toggle",
            "Dropdown menu handlers",
            "Search functionality",
            "Sticky header on scroll",
            "Active section highlighting",
            "Keyboard navigation",
        ],
        estimated_lines=150,
    ),
    WebsiteFeature(
        name="Hero Section with Slider",
        description="Full-featured hero with carousel, animations, and CTAs",
        html_elements=[
            "Hero container with slides",
            "Slide navigation dots",
            "Previous/next buttons",
            "Animated headlines",
            "CTA buttons",
            "Background images/videos",
            "Statistics counters",
        ],
        css_requirements=[
            "Slide transitions",
            "Button animations",
            "Text animations",
            "Responsive sizing",
            "Overlay effects",
            "Parallax scrolling",
        ],
        js_implementation=[
            "Carousel functionality",
            "Auto-play with pause",
            "Touch/swipe support",
            "Animated counters",
            "Parallax effects",
            "Video control",
        ],
        estimated_lines=200,
    ),
    WebsiteFeature(
        name="Feature Showcase Grid",
        description="Interactive feature cards with animations and modals",
        html_elements=[
            "Feature grid container",
            "Feature cards with icons",
            "Hover overlays",
            "Read more buttons",
            "Modal popups",
            "Category filters",
        ],
        css_requirements=[
            "Grid layout system",
            "Card hover effects",
            "Icon animations",
            "Modal styling",
            "Filter transitions",
            "Loading states",
        ],
        js_implementation=[
            "Filter functionality",
            "Modal management",
            "Lazy loading",
            "Animation on scroll",
            "Category sorting",
            "View toggle (grid/list)",
        ],
        estimated_lines=180,
    ),
    WebsiteFeature(
        name="Advanced Contact Form",
        description="Multi-step form with validation, file upload, and confirmation",
        html_elements=[
            "Multi-step form container",
            "Progress indicator",
            "Form fields with labels",
            "File upload area",
            "Terms checkbox",
            "Submit button",
            "Success message",
        ],
        css_requirements=[
            "Form field styling",
            "Progress bar",
            "Error states",
            "File upload styling",
            "Button states",
            "Success animations",
        ],
        js_implementation=[
            "Multi-step navigation",
            "Field validation",
            "File upload handling",
            "Progress tracking",
            "Form submission",
            "Success/error handling",
        ],
        estimated_lines=220,
    ),
    WebsiteFeature(
        name="Interactive Gallery",
        description="Filterable image gallery with lightbox and zoom",
        html_elements=[
            "Gallery container",
            "Filter buttons",
            "Image grid",
            "Lightbox overlay",
            "Image navigation",
            "Zoom controls",
            "Image captions",
        ],
        css_requirements=[
            "Masonry layout",
            "Filter animations",
            "Lightbox styling",
            "Zoom effects",
            "Loading placeholders",
            "Responsive grid",
        ],
        js_implementation=[
            "Filter logic",
            "Lightbox functionality",
            "Image zoom",
            "Keyboard navigation",
            "Lazy loading",
            "Touch gestures",
        ],
        estimated_lines=190,
    ),
    WebsiteFeature(
        name="Testimonial System",
        description="Carousel with ratings, filters, and video testimonials",
        html_elements=[
            "Testimonial carousel",
            "Rating stars",
            "Customer info",
            "Video testimonials",
            "Filter options",
            "Navigation controls",
        ],
        css_requirements=[
            "Carousel styling",
            "Star ratings",
            "Card designs",
            "Video styling",
            "Animation effects",
            "Responsive layout",
        ],
        js_implementation=[
            "Carousel logic",
            "Video playback",
            "Filter functionality",
            "Auto-rotation",
            "Pause on hover",
            "Touch support",
        ],
        estimated_lines=160,
    ),
    WebsiteFeature(
        name="Advanced Footer",
        description="Multi-column footer with newsletter, social, and sitemap",
        html_elements=[
            "Footer columns",
            "Newsletter form",
            "Social media links",
            "Sitemap links",
            "Contact info",
            "Legal links",
            "Back to top button",
        ],
        css_requirements=[
            "Column layout",
            "Newsletter styling",
            "Social icons",
            "Link hover effects",
            "Mobile layout",
            "Back to top animation",
        ],
        js_implementation=[
            "Newsletter signup",
            "Back to top scroll",
            "Social sharing",
            "Dynamic year",
            "Link tracking",
            "Cookie notice",
        ],
        estimated_lines=140,
    ),
]


def _bullets(items: List[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


def total_estimated_lines() -> int:
    return sum(feature.estimated_lines for feature in COMPREHENSIVE_FEATURES)


def generate_feature_list_prompt(website_type: str) -> str:
    """Render every catalogue feature as an implementation guide for the given website type"""
    blocks = []
    for feature in COMPREHENSIVE_FEATURES:
        blocks.append(
            f"\n### {feature.name}\n"
            f"{feature.description}\n\n"
            f"HTML Elements Required:\n{_bullets(feature.html_elements)}\n\n"
            f"CSS Styling Required:\n{_bullets(feature.css_requirements)}\n\n"
            f"JavaScript Implementation:\n{_bullets(feature.js_implementation)}\n\n"
            f"Estimated Code Lines: {feature.estimated_lines}\n"
        )
    features = "\n\n".join(blocks)

    return f"""
## COMPREHENSIVE FEATURE IMPLEMENTATION GUIDE

For the {website_type} website, implement ALL of the following features in detail:

{features}

## ADDITIONAL REQUIREMENTS:

1. Each feature must be FULLY FUNCTIONAL, not just visual
2. Include proper error handling for all interactions
3. Add loading states and feedback for user actions
4. Implement keyboard navigation for accessibility
5. Ensure mobile responsiveness for all features
6. Add smooth animations and transitions
7. Include detailed comments explaining the implementation

Total estimated lines: {total_estimated_lines()}+ lines

Remember: This is a MINIMUM requirement. Add more features and functionality to create a truly comprehensive website."""
