"""
Website template catalogue and keyword-based template selection.

Each template describes the sections, features, design principles and code
patterns the LLM should follow for a kind of website.
"""

from typing import List, Optional, Tuple
from pydantic import Field
from sitegen_api.models.schemas import CamelModel
import logging

logger = logging.getLogger(__name__)


class TemplateStructure(CamelModel):
    sections: List[str] = Field(default_factory=list)
    features: List[str] = Field(default_factory=list)
    design_principles: List[str] = Field(default_factory=list)


class CodePatterns(CamelModel):
    html: List[str] = Field(default_factory=list)
    css: List[str] = Field(default_factory=list)
    javascript: List[str] = Field(default_factory=list)


class WebsiteTemplate(CamelModel):
    """A named website blueprint used to expand user prompts"""
    id: str
    name: str
    category: str
    description: str
    structure: TemplateStructure
    code_patterns: CodePatterns
    best_practices: List[str] = Field(default_factory=list)
    example_prompt: str = ""


WEBSITE_TEMPLATES: List[WebsiteTemplate] = [
    WebsiteTemplate(
        id="modern-portfolio",
        name="Modern Portfolio",
        category="portfolio",
        description="A sleek, professional portfolio website with smooth animations and modern design",
        structure=TemplateStructure(
            sections=[
                "Hero section with animated text and CTA",
                "About section with skills grid",
                "Projects showcase with filtering",
                "Experience timeline",
                "Contact form with validation",
                "Footer with social links",
            ],
            features=[
                "Smooth scroll navigation",
                "Dark/light mode toggle",
                "Responsive grid layouts",
                "Intersection Observer animations",
                "Form validation",
                "Mobile-first design",
            ],
            design_principles=[
                "Minimalist design with focus on content",
                "High contrast for readability",
                "Consistent spacing using 8px grid",
                "Typography hierarchy with 3 font sizes max",
                "Accent color for CTAs and highlights",
                "Subtle animations on scroll",
            ],
        ),
        code_patterns=CodePatterns(
            html=[
                "Semantic HTML5 structure",
                "ARIA labels for accessibility",
                "Meta tags for SEO",
                "Structured data markup",
                "Progressive enhancement",
            ],
            css=[
                "CSS Grid for layouts",
                "CSS custom properties for theming",
                "Clamp() for responsive typography",
                "Container queries where applicable",
                "Smooth transitions and transforms",
                "Mobile-first media queries",
            ],
            javascript=[
                "Intersection Observer for animations",
                "Event delegation for performance",
                "Debounced scroll events",
                "Form validation with regex",
                "LocalStorage for theme preference",
                "Lazy loading for images",
            ],
        ),
        best_practices=[
            "Performance: Optimize images, minify code, lazy load",
            "Accessibility: WCAG 2.1 AA compliance",
            "SEO: Meta tags, structured data, semantic HTML",
            "Security: Input sanitization, HTTPS",
            "UX: Fast load times, smooth interactions",
        ],
        example_prompt=(
            "Create a modern portfolio website for a software developer with hero section, "
            "projects showcase, skills grid, and contact form"
        ),
    ),
    WebsiteTemplate(
        id="saas-landing",
        name="SaaS Landing Page",
        category="landing",
        description="High-converting SaaS landing page with compelling copy and clear CTAs",
        structure=TemplateStructure(
            sections=[
                "Navigation with sticky header",
                "Hero with value proposition",
                "Features grid with icons",
                "Benefits section with testimonials",
                "Pricing table with toggle",
                "FAQ accordion",
                "CTA section",
                "Footer with links",
            ],
            features=[
                "Sticky navigation on scroll",
                "Animated statistics counters",
                "Interactive pricing calculator",
                "Testimonial carousel",
                "FAQ accordion",
                "Newsletter signup",
                "Social proof elements",
            ],
            design_principles=[
                "Clear visual hierarchy",
                "Consistent brand colors",
                "Whitespace for clarity",
                "F-pattern layout",
                "Contrast for CTAs",
                "Trust signals throughout",
            ],
        ),
        code_patterns=CodePatterns(
            html=[
                "Schema markup for business",
                "Microdata for reviews",
                "Form elements with labels",
                "Button hierarchy (primary/secondary)",
                "Loading states for forms",
            ],
            css=[
                "CSS Grid for pricing tables",
                "Flexbox for navigation",
                "Backdrop filters for depth",
                "Gradient overlays",
                "Box shadows for elevation",
                "Hover states for interactivity",
            ],
            javascript=[
                "Smooth scroll to sections",
                "Pricing toggle functionality",
                "Form submission handling",
                "Analytics event tracking",
                "Countdown timers for urgency",
                "Exit intent popups",
            ],
        ),
        best_practices=[
            "Conversion: Clear CTAs, social proof, urgency",
            "Performance: Critical CSS, async scripts",
            "Trust: Security badges, testimonials, guarantees",
            "Mobile: Touch-friendly buttons, readable text",
            "Analytics: Event tracking, conversion goals",
        ],
        example_prompt=(
            "Create a SaaS landing page for a project management tool with hero section, "
            "features grid, pricing table, testimonials, and FAQ"
        ),
    ),
    WebsiteTemplate(
        id="ecommerce-store",
        name="E-commerce Store",
        category="ecommerce",
        description="Modern e-commerce website with product grid, cart functionality, and checkout flow",
        structure=TemplateStructure(
            sections=[
                "Header with search and cart",
                "Hero banner with promotions",
                "Featured products carousel",
                "Product categories grid",
                "Product listing with filters",
                "Product detail pages",
                "Shopping cart sidebar",
                "Checkout process",
                "Footer with policies",
            ],
            features=[
                "Product search with filters",
                "Shopping cart with localStorage",
                "Product image galleries",
                "Size/color selectors",
                "Wishlist functionality",
                "Quick view modals",
                "Related products",
                "Reviews and ratings",
            ],
            design_principles=[
                "Product-focused design",
                "Clear pricing display",
                "Trust badges visible",
                "Easy navigation",
                "Mobile shopping optimized",
                "Fast image loading",
            ],
        ),
        code_patterns=CodePatterns(
            html=[
                "Product schema markup",
                "Breadcrumb navigation",
                "Image alt texts for SEO",
                "Form validation messages",
                "Loading skeletons",
            ],
            css=[
                "Grid layouts for products",
                "Aspect ratio boxes for images",
                "Custom select dropdowns",
                "Progress indicators",
                "Toast notifications",
                "Modal overlays",
            ],
            javascript=[
                "Cart state management",
                "Product filtering logic",
                "Image zoom functionality",
                "Add to cart animations",
                "Quantity selectors",
                "Price calculations",
            ],
        ),
        best_practices=[
            "UX: Easy checkout, clear CTAs, product info",
            "Performance: Image optimization, lazy loading",
            "Trust: Secure badges, return policy, reviews",
            "Mobile: Touch gestures, mobile payments",
            "SEO: Product schema, meta descriptions",
        ],
        example_prompt=(
            "Create an e-commerce website for a clothing store with product grid, filters, "
            "shopping cart, and modern design"
        ),
    ),
    WebsiteTemplate(
        id="restaurant-website",
        name="Restaurant Website",
        category="hospitality",
        description="Elegant restaurant website with menu, reservations, and ambiance showcase",
        structure=TemplateStructure(
            sections=[
                "Hero with restaurant imagery",
                "About section with story",
                "Menu with categories",
                "Gallery of dishes/ambiance",
                "Reservation form",
                "Location with map",
                "Hours and contact",
                "Reviews section",
            ],
            features=[
                "Interactive menu with prices",
                "Table reservation system",
                "Image gallery with lightbox",
                "Google Maps integration",
                "Social media feeds",
                "Special offers banner",
                "Newsletter signup",
            ],
            design_principles=[
                "Appetizing food photography",
                "Elegant typography",
                "Warm color palette",
                "Easy-to-read menus",
                "Mobile-friendly design",
                "Fast loading images",
            ],
        ),
        code_patterns=CodePatterns(
            html=[
                "Restaurant schema markup",
                "Menu structured data",
                "Reservation form fields",
                "Address microformat",
                "Image galleries",
            ],
            css=[
                "Parallax scrolling effects",
                "Menu card designs",
                "Image hover effects",
                "Responsive tables",
                "Print styles for menus",
                "Custom fonts for branding",
            ],
            javascript=[
                "Reservation form validation",
                "Gallery lightbox",
                "Smooth scroll navigation",
                "Menu filtering",
                "Map initialization",
                "Opening hours display",
            ],
        ),
        best_practices=[
            "Local SEO: Schema markup, Google My Business",
            "Mobile: Click-to-call, easy navigation",
            "Performance: Optimized images, fast load",
            "Accessibility: Screen reader friendly menus",
            "Conversion: Clear CTAs for reservations",
        ],
        example_prompt=(
            "Create a restaurant website with elegant design, menu display, reservation system, "
            "gallery, and location information"
        ),
    ),
    WebsiteTemplate(
        id="corporate-business",
        name="Corporate Business",
        category="business",
        description="Professional corporate website with services, team, and company information",
        structure=TemplateStructure(
            sections=[
                "Professional header with logo",
                "Hero with company message",
                "Services/solutions grid",
                "About company section",
                "Team members showcase",
                "Client logos/testimonials",
                "Case studies",
                "Contact information",
                "Footer with sitemap",
            ],
            features=[
                "Multi-level navigation",
                "Service detail pages",
                "Team member profiles",
                "Case study layouts",
                "Contact forms",
                "Office locations",
                "Career opportunities",
                "News/blog section",
            ],
            design_principles=[
                "Professional color scheme",
                "Clean, corporate design",
                "Trustworthy appearance",
                "Clear information hierarchy",
                "Consistent branding",
                "Accessible design",
            ],
        ),
        code_patterns=CodePatterns(
            html=[
                "Organization schema markup",
                "Breadcrumb navigation",
                "Contact information markup",
                "Team member cards",
                "Service descriptions",
            ],
            css=[
                "Corporate color variables",
                "Professional typography",
                "Card-based layouts",
                "Hover effects for links",
                "Responsive tables",
                "Print-friendly styles",
            ],
            javascript=[
                "Multi-level menu navigation",
                "Form validation and submission",
                "Smooth scroll to sections",
                "Tab interfaces",
                "Accordion for FAQs",
                "Cookie consent banner",
            ],
        ),
        best_practices=[
            "Trust: Professional design, client logos, certifications",
            "SEO: Service pages, location pages, schema markup",
            "Accessibility: WCAG compliance, keyboard navigation",
            "Performance: Optimized assets, caching strategies",
            "Security: SSL, secure forms, privacy policy",
        ],
        example_prompt=(
            "Create a corporate website for a consulting firm with services showcase, team section, "
            "case studies, and professional design"
        ),
    ),
]

TEMPLATE_IDS = [t.id for t in WEBSITE_TEMPLATES]

# Checked in order against the lower-cased prompt; the first group with a hit wins.
TEMPLATE_KEYWORDS: List[Tuple[Tuple[str, ...], str]] = [
    (("portfolio", "personal"), "modern-portfolio"),
    (("saas", "landing"), "saas-landing"),
    (("shop", "store", "ecommerce"), "ecommerce-store"),
    (("restaurant", "cafe", "food"), "restaurant-website"),
    (("corporate", "business", "company"), "corporate-business"),
]


def get_template(template_id: str) -> Optional[WebsiteTemplate]:
    for template in WEBSITE_TEMPLATES:
        if template.id == template_id:
            return template
    return None


def get_templates_by_category(category: str) -> List[WebsiteTemplate]:
    return [t for t in WEBSITE_TEMPLATES if t.category == category]


def get_all_templates() -> List[WebsiteTemplate]:
    return list(WEBSITE_TEMPLATES)


def get_template_categories() -> List[str]:
    """Unique categories in declaration order"""
    categories = []
    for template in WEBSITE_TEMPLATES:
        if template.category not in categories:
            categories.append(template.category)
    return categories


def search_templates(keyword: str) -> List[WebsiteTemplate]:
    """Case-insensitive substring search over name, description and category"""
    term = keyword.lower()
    return [
        t for t in WEBSITE_TEMPLATES
        if term in t.name.lower() or term in t.description.lower() or term in t.category.lower()
    ]


def select_template(prompt: str, template_id: Optional[str] = None) -> Optional[WebsiteTemplate]:
    """
    Pick the template for a prompt.

    An explicit template_id is looked up directly and never falls back to
    keyword detection, so an unknown id yields None.
    """
    if template_id:
        template = get_template(template_id)
        if template is None:
            logger.warning(f"[TEMPLATES] Unknown template id requested: {template_id}")
        return template

    prompt_lower = prompt.lower()
    for keywords, matched_id in TEMPLATE_KEYWORDS:
        if any(keyword in prompt_lower for keyword in keywords):
            logger.debug(f"[TEMPLATES] Prompt matched template {matched_id}")
            return get_template(matched_id)
    return None
