"""
Prompt enhancement - expands a free-form user request into structured LLM instructions.

The enhanced prompt is assembled in this order:
  1. Code size requirements
  2. The user's request
  3. JavaScript requirements for features detected in the request
  4. Hero section requirements
  5. Template guidance (or generic guidance when no template matches)
"""

from typing import List, Optional, Tuple
from sitegen_api.enhancer.templates import WebsiteTemplate, select_template
from sitegen_api.enhancer.javascript_patterns import detect_required_features
from sitegen_api.enhancer.code_requirements import generate_code_requirements_prompt
from sitegen_api.enhancer.features import generate_feature_list_prompt
import logging

logger = logging.getLogger(__name__)


def _bullets(items: List[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


ADDITIONAL_REQUIREMENTS = """## Additional Requirements:
1. Use semantic HTML5 elements throughout
2. Implement responsive design with mobile-first approach
3. Ensure WCAG 2.1 AA accessibility compliance
4. Optimize for Core Web Vitals (LCP, FID, CLS)
5. Include proper meta tags for SEO
6. Use modern CSS features (Grid, Flexbox, Custom Properties)
7. Implement smooth animations and transitions
8. Ensure cross-browser compatibility
9. Add loading states and error handling
10. Include comments explaining complex code sections"""

VISUAL_DESIGN_GUIDELINES = """## Visual Design Guidelines:
1. Use a cohesive color palette with proper contrast ratios
2. Implement a clear typography hierarchy
3. Add subtle shadows and depth for modern look
4. Use consistent spacing (8px grid system)
5. Include hover states for all interactive elements
6. Ensure touch-friendly tap targets (min 44x44px)
7. Add focus states for keyboard navigation
8. Use appropriate imagery and icons
9. Implement smooth transitions (200-300ms)
10. Create a polished, professional appearance"""

FINAL_CRITICAL_REQUIREMENTS = """
## FINAL CRITICAL REQUIREMENTS:

1. **MINIMUM CODE SIZE**: Generate AT LEAST 1000 lines of functional code
2. **COMPLETE IMPLEMENTATION**: Every feature must be fully functional, not just visual
3. **NO PLACEHOLDERS**: Use real content, real functionality, real interactions
4. **PRODUCTION READY**: The code should be ready for deployment without modifications
5. **COMPREHENSIVE TESTING**: Ensure all features work correctly on all devices

Generate a complete, production-ready website following these guidelines with FULLY FUNCTIONAL JavaScript for all interactive features.
DO NOT create a minimal or skeleton website. Create a FULL, FEATURE-RICH, PROFESSIONAL website with ALL functionality implemented."""


# Renders the template sections (type, structure, code patterns, best practices).
def render_template_guidance(template: WebsiteTemplate) -> str:
    return f"""

## Website Type: {template.name}
{template.description}

## Required Sections:
{_bullets(template.structure.sections)}

## Key Features to Implement:
{_bullets(template.structure.features)}

## Design Principles:
{_bullets(template.structure.design_principles)}

## Code Quality Requirements:

### HTML Structure:
{_bullets(template.code_patterns.html)}

### CSS Patterns:
{_bullets(template.code_patterns.css)}

### JavaScript Functionality:
{_bullets(template.code_patterns.javascript)}

## Best Practices to Follow:
{_bullets(template.best_practices)}

{ADDITIONAL_REQUIREMENTS}

{VISUAL_DESIGN_GUIDELINES}"""


def enhance_javascript_prompt(base_prompt: str, detected_features: List[str], template_id: Optional[str] = None) -> str:
    """Append the JavaScript quality block, listing each detected feature"""
    feature_blocks = "\n".join(
        f"""
- {feature} with full functionality and error handling
  - Implement responsive design for all screen sizes
  - Add proper keyboard accessibility
  - Include loading states and error handling
  - Add proper animations and transitions
  - Implement proper state management
  - Add comprehensive validation and error messages"""
        for feature in detected_features
    )
    context = f" for the {template_id} template" if template_id else ""

    return f"""{base_prompt}

## ADVANCED JAVASCRIPT IMPLEMENTATION REQUIREMENTS

Your generated JavaScript code{context} MUST follow these professional standards:

### Architecture & Organization
- Use modern ES6+ syntax and features throughout
- Implement proper module pattern with clear separation of concerns
- Create reusable utility functions for common operations
- Use classes for complex components
- Implement proper event delegation for performance
- Implement proper error boundaries and fallbacks

### Performance Optimization
- Use efficient DOM manipulation techniques (DocumentFragment, etc.)
- Implement proper debouncing and throttling for scroll/resize events
- Use IntersectionObserver for lazy loading and scroll effects
- Use requestAnimationFrame for animations

### Advanced Features
- Create responsive interactions that work across all devices
- Implement proper form validation with detailed error messages
- Create accessible components following WCAG 2.1 AA standards
- Implement proper keyboard navigation for all interactive elements
- Use proper focus management for modals and dialogs
- Implement proper touch interactions for mobile

### Code Quality
- Add comprehensive error handling with try/catch blocks
- Use consistent naming conventions (camelCase for variables/functions)
- Add detailed comments explaining complex logic
- Use proper async/await patterns with error handling
- Implement proper state management for UI components

### Security
- Implement proper input sanitization for all user inputs
- Use secure storage methods for sensitive data
- Implement proper XSS protection

### Specific Features to Implement
{feature_blocks}

Remember: Your JavaScript code should be PRODUCTION-READY, FULLY FUNCTIONAL, and PROFESSIONAL QUALITY. Do not create minimal implementations or placeholders.
"""


def enhance_hero_section_prompt(base_prompt: str) -> str:
    """Append the hero section and text contrast requirements"""
    return f"""{base_prompt}

## CRITICAL HERO SECTION REQUIREMENTS

Your generated website MUST include a rich, visually engaging hero section with NO blank space or minimal content. The hero section MUST include:

1. **Visual Elements (REQUIRED)**:
   - High-quality background image or pattern (NOT a plain background)
   - At least one product image, illustration, or graphic element
   - Visual hierarchy with proper contrast between elements
   - If using a light background, ALWAYS use dark text (black or dark gray)
   - If using a dark background, ALWAYS use light text (white or light gray)

2. **Content Elements (REQUIRED)**:
   - Compelling headline with clear value proposition (in proper contrasting color)
   - Descriptive subheading that explains the offering (at least 10-15 words)
   - At least 2 call-to-action buttons with different purposes
   - Additional trust elements (ratings, customer count, testimonial snippet, etc.)
   - ALWAYS ensure text has a minimum contrast ratio of 4.5:1 for accessibility

3. **Layout Requirements (REQUIRED)**:
   - Multi-column layout for desktop (NOT centered text only)
   - Proper spacing between all elements (NO cramped content)
   - Visual balance between text and imagery
   - NEVER leave empty or blank spaces in the hero section

4. **Interactive Elements (REQUIRED - Choose at least 2)**:
   - Animated elements or transitions
   - Hover effects on buttons and interactive elements
   - Image slider or carousel
   - Video background or embedded video
   - Animated text or typing effect
   - Parallax scrolling effect

5. **Technical Requirements**:
   - Fully responsive across all devices
   - Optimized images with proper alt text
   - Proper semantic HTML structure
   - Background overlays or gradients to ensure text readability

DO NOT create a hero section with just a headline, subtitle, and button on a plain background. This is insufficient and will be rejected.

CRITICAL TEXT CONTRAST REQUIREMENTS:
- ALWAYS use dark text (black or dark gray) on light backgrounds
- ALWAYS use light text (white or light gray) on dark backgrounds
- If using colored backgrounds, ensure text has sufficient contrast
- When in doubt, add a semi-transparent overlay to improve text readability
- NEVER use white or light-colored text on light backgrounds
- NEVER use black or dark-colored text on dark backgrounds"""


def enhance_generic_prompt(user_prompt: str) -> str:
    """General guidance used when no template matches the request"""
    detected_features = detect_required_features(user_prompt)
    detected_line = (
        f"\n- Implement these features: {', '.join(detected_features)}" if detected_features else ""
    )

    return f"""
{user_prompt}

## General Website Requirements:

### Structure:
- Clean, semantic HTML5 structure
- Minimum 10-12 major sections
- Proper heading hierarchy
- Accessible navigation with multiple menu items
- Responsive layout with multiple breakpoints

### Design:
- Modern, professional appearance
- Consistent color scheme with CSS variables
- Clear typography hierarchy with multiple font sizes
- Appropriate whitespace and padding
- Mobile-first approach with tablet and desktop layouts
- Animations and transitions throughout

### Functionality:
- Smooth interactions with visual feedback
- Form validation with multiple fields
- Responsive navigation with mobile menu
- Loading states for all async operations
- Error handling for all user inputs
- Modal/popup functionality
- Accordion/tab interfaces
- Image galleries or carousels{detected_line}

### Interactive Elements Required:
- Navigation with dropdowns and mobile menu
- Hero section with animations
- Feature cards with hover effects
- Contact form with validation
- Image gallery with lightbox
- Testimonial carousel
- FAQ accordion
- Newsletter signup
- Back to top button

### Best Practices:
- SEO optimization with meta tags and structured data
- Performance optimization with lazy loading
- Accessibility compliance with ARIA labels
- Cross-browser compatibility
- Security considerations for forms

### Code Quality:
- Clean, well-commented code
- Consistent naming conventions
- Modular CSS organization
- Efficient JavaScript with ES6+
- Progressive enhancement

Generate a high-quality, production-ready website following modern web development best practices."""


def enhance_prompt(user_prompt: str, template_id: Optional[str] = None) -> Tuple[str, Optional[str]]:
    """
    Enhance a prompt and report which template was applied.

    Returns:
        (enhanced_prompt, applied_template_id) - the id is None when the
        generic enhancement was used.
    """
    detected_features = detect_required_features(user_prompt)
    template = select_template(user_prompt, template_id)
    logger.info(
        f"[ENHANCE] template={template.id if template else None} | "
        f"features={len(detected_features)} | prompt_chars={len(user_prompt)}"
    )

    if template is None:
        enhanced = (
            enhance_generic_prompt(user_prompt)
            + generate_code_requirements_prompt()
            + generate_feature_list_prompt("generic")
            + enhance_javascript_prompt("", detected_features)
        )
        return enhanced, None

    enhanced = generate_code_requirements_prompt() + "\n\n" + user_prompt
    enhanced = enhance_javascript_prompt(enhanced, detected_features, template.id)
    enhanced = enhance_hero_section_prompt(enhanced)
    enhanced += render_template_guidance(template)
    enhanced += generate_feature_list_prompt(template.id)
    enhanced += FINAL_CRITICAL_REQUIREMENTS
    return enhanced, template.id


def enhance_prompt_with_template(user_prompt: str, template_id: Optional[str] = None) -> str:
    enhanced, _ = enhance_prompt(user_prompt, template_id)
    return enhanced
