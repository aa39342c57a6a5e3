"""Minimum size and content requirements for generated websites"""

from dataclasses import dataclass
from typing import List

HTML_MIN_LINES = 300
CSS_MIN_LINES = 500
JS_MIN_LINES = 500
TOTAL_MIN_LINES = 1300


@dataclass(frozen=True)
class CodeRequirement:
    category: str
    min_lines: int
    required_elements: List[str]


CODE_REQUIREMENTS: List[CodeRequirement] = [
    CodeRequirement(
        category="HTML Structure",
        min_lines=HTML_MIN_LINES,
        required_elements=[
            "Complete semantic HTML5 structure with proper document outline",
            "Comprehensive meta tags for SEO and social sharing",
            "Proper use of landmark elements (header, nav, main, footer, etc.)",
            "Structured data markup using JSON-LD",
            "Proper heading hierarchy (h1-h6) with logical structure",
            "Multiple sections with appropriate ARIA roles",
            "Responsive navigation with mobile menu",
            "Hero section with compelling call-to-action",
            "Feature sections with cards/grids",
            "Testimonials or social proof section",
            "Pricing or product showcase section",
            "Team or about section with profiles",
            "FAQ or accordion section with proper ARIA attributes",
            "Contact form with proper validation and accessibility",
            "Footer with multiple columns and site map",
            "Modal/popup structures with proper focus management",
            "Loading states and skeleton screens",
            "Error states and feedback messages",
            "Success confirmation messages",
            "Proper image handling with srcset and sizes",
            "SVG icons with proper accessibility",
        ],
    ),
    CodeRequirement(
        category="CSS Styling",
        min_lines=CSS_MIN_LINES,
        required_elements=[
            "Comprehensive CSS custom properties (variables) system",
            "Complete responsive design with mobile-first approach",
            "Multiple breakpoints (mobile, tablet, desktop, large desktop)",
            "Advanced Grid and Flexbox layouts",
            "Complex animations and transitions",
            "Hover, focus, and active states for all interactive elements",
            "Focus visible states for keyboard navigation",
            "Loading animations and skeleton screens",
            "Custom form styling with validation states",
            "Modal/overlay styling with proper z-index management",
            "Print styles for better printing experience",
            "Dark mode support with prefers-color-scheme",
            "Reduced motion support with prefers-reduced-motion",
            "High contrast mode support",
            "Custom scrollbar styling",
            "Advanced typography system with responsive sizing",
            "Custom button and input styles",
            "Card hover effects and animations",
            "Hero section with advanced layout",
            "Feature grid with responsive behavior",
            "Testimonial carousel styling",
            "Pricing table with highlight effects",
            "Team grid with hover effects",
            "FAQ accordion styling",
            "Contact form with validation styling",
            "Footer with responsive columns",
            "Navigation with dropdown styling",
            "Mobile menu with animations",
            "Toast/notification styling",
            "Progress indicators",
        ],
    ),
    CodeRequirement(
        category="JavaScript Functionality",
        min_lines=JS_MIN_LINES,
        required_elements=[
            "Comprehensive event listeners with proper delegation",
            "Form validation with detailed error messages",
            "Dynamic content loading and manipulation",
            "Local storage for user preferences and data",
            "Session storage for temporary data",
            "API simulation or fetch calls with error handling",
            "Comprehensive error handling with try-catch blocks",
            "Multiple utility functions and modules",
            "Animation control with requestAnimationFrame",
            "Scroll-based interactions with IntersectionObserver",
            "Resize handling with debouncing",
            "Mobile menu functionality with proper focus management",
            "Dropdown menus with keyboard navigation",
            "Modal/dialog management with focus trapping",
            "Carousel/slider implementation with touch support",
            "Accordion/tab functionality with ARIA support",
            "Search/filter functionality with highlighting",
            "Form submission with validation and feedback",
            "Toast/notification system",
            "Lazy loading implementation for images and content",
            "Theme switching with localStorage persistence",
            "Countdown timers or animations",
            "Progress indicators for multi-step processes",
            "Copy to clipboard functionality",
            "Share functionality for social media",
            "Form auto-save functionality",
            "Input masking for formatted inputs",
            "Drag and drop functionality",
            "Infinite scroll or pagination",
            "Data visualization with charts or graphs",
        ],
    ),
]


def _bullets(items: List[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


def generate_code_requirements_prompt() -> str:
    html, css, js = CODE_REQUIREMENTS
    return f"""
## MANDATORY CODE REQUIREMENTS:

Your generated website MUST contain AT LEAST {TOTAL_MIN_LINES} lines of well-structured, functional code with the following distribution:

### HTML Requirements (Minimum {html.min_lines} lines):
{_bullets(html.required_elements)}

### CSS Requirements (Minimum {css.min_lines} lines):
{_bullets(css.required_elements)}

### JavaScript Requirements (Minimum {js.min_lines} lines):
{_bullets(js.required_elements)}

## CRITICAL: DO NOT GENERATE MINIMAL OR SKELETON CODE

1. Every section must be fully implemented with real content and functionality
2. All interactive features must have complete JavaScript implementation
3. CSS must include comprehensive styling for all elements and states
4. Include detailed comments explaining complex logic and functionality
5. Implement proper error handling for all user interactions
6. Add loading states and animations for better user experience
7. Include comprehensive accessibility features throughout

## MANDATORY FEATURES TO IMPLEMENT:

1. **Advanced Navigation System**
   - Sticky header with scroll detection
   - Mobile hamburger menu with animations
   - Dropdown menus with keyboard navigation
   - Active state indicators
   - Smooth scroll to sections
   - Search functionality in navigation

2. **Hero Section**
   - Animated headline with typing effect
   - Multiple CTAs with hover effects
   - Background image/video with overlay
   - Parallax scrolling effects
   - Animated statistics or key points
   - Responsive layout for all devices

3. **Content Sections**
   - Feature cards with hover animations
   - Image galleries with lightbox functionality
   - Testimonial carousel with pagination
   - Team member profiles with social links
   - Pricing tables with toggle functionality
   - FAQ accordion with smooth animations
   - Portfolio grid with filtering options

4. **Interactive Elements**
   - Contact form with real-time validation
   - Newsletter signup with success feedback
   - Filter/sort options for content
   - Tab interfaces with smooth transitions
   - Modal popups with focus management
   - Notification system for user feedback

5. **Footer**
   - Multi-column layout with responsive design
   - Social media links with hover effects
   - Quick links organized by category
   - Contact information with microdata
   - Copyright and legal links
   - Back to top button with smooth scroll

## CODE QUALITY REQUIREMENTS:

1. Use meaningful variable and function names following conventions
2. Implement comprehensive error handling for all operations
3. Add detailed comments explaining complex logic
4. Use modern JavaScript (ES6+) with proper patterns
5. Implement responsive design for all screen sizes (mobile, tablet, desktop)
6. Ensure cross-browser compatibility with feature detection
7. Optimize for performance with efficient code
8. Follow accessibility best practices (WCAG 2.1 AA)
9. Implement proper SEO practices with meta tags and structured data
10. Use proper semantic HTML5 elements throughout

Remember: Generate a COMPLETE, PRODUCTION-READY website with ALL features fully implemented. Do not create placeholder or minimal implementations."""
