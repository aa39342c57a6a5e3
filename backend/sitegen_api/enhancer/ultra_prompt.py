"""
Style-driven prompt builder used by POST /api/generate-website.

Combines design principles for the requested style, mandatory quality
requirements, optional advanced feature snippets and reference UI components.
"""

from typing import Dict, List, Optional
from pydantic import BaseModel


class EnhancedPromptConfig(BaseModel):
    """Options that shape the generated website"""
    base_prompt: str
    template: Optional[str] = None
    features: Optional[List[str]] = None
    style: str = "modern"
    color_scheme: str = "vibrant"
    animations: bool = True
    accessibility: bool = True
    performance: bool = True
    seo: bool = True
    responsive: bool = True
    interactivity: str = "high"


DESIGN_PRINCIPLES: Dict[str, Dict[str, str]] = {
    "modern": {
        "layout": "Use CSS Grid and Flexbox for complex layouts. Implement asymmetric designs with overlapping elements.",
        "typography": "Use variable fonts, large headings (clamp(3rem, 8vw, 6rem)), and mix serif with sans-serif fonts.",
        "spacing": "Use generous whitespace, minimum padding of 2rem, and create breathing room between sections.",
        "colors": "Use gradients, glassmorphism effects, and vibrant accent colors on neutral backgrounds.",
        "effects": "Add subtle animations, parallax scrolling, and micro-interactions on hover.",
    },
    "minimalist": {
        "layout": "Use single-column layouts with maximum width of 1200px. Center all content.",
        "typography": "Use one font family, consistent sizes, and high contrast text.",
        "spacing": "Use mathematical ratios (1:1.618) for spacing. Lots of negative space.",
        "colors": "Maximum 3 colors. Black, white, and one accent color.",
        "effects": "Subtle transitions only. No decorative elements.",
    },
    "bold": {
        "layout": "Full-width sections, diagonal cuts, and overlapping elements.",
        "typography": "Extra bold fonts, uppercase headings, and dramatic size contrasts.",
        "spacing": "Tight spacing for impact, generous margins between sections.",
        "colors": "High contrast color combinations, neon accents, dark backgrounds.",
        "effects": "Bold hover effects, animated gradients, and dynamic transitions.",
    },
    "elegant": {
        "layout": "Symmetrical layouts, golden ratio proportions, refined grid systems.",
        "typography": "Serif fonts for headings, elegant sans-serif for body, proper kerning.",
        "spacing": "Balanced spacing, consistent rhythm, harmonious proportions.",
        "colors": "Muted color palette, gold accents, sophisticated neutrals.",
        "effects": "Smooth transitions, subtle shadows, refined hover states.",
    },
    "playful": {
        "layout": "Asymmetric layouts, curved sections, unexpected element placement.",
        "typography": "Mix of playful fonts, varied sizes, and fun text effects.",
        "spacing": "Dynamic spacing, overlapping elements, broken grid patterns.",
        "colors": "Bright, cheerful colors, rainbow gradients, fun combinations.",
        "effects": "Bouncy animations, particle effects, interactive elements.",
    },
}

ADVANCED_FEATURES: Dict[str, str] = {
    "animations": """
/* Advanced Animation System */
@keyframes fadeInUp {
  from { opacity: 0; transform: translateY(30px); }
  to { opacity: 1; transform: translateY(0); }
}

@keyframes scaleIn {
  from { opacity: 0; transform: scale(0.9); }
  to { opacity: 1; transform: scale(1); }
}

.animate-on-scroll {
  opacity: 0;
  animation: fadeInUp 0.8s ease-out forwards;
}

<script>
  const observer = new IntersectionObserver((entries) => {
    entries.forEach(entry => {
      if (entry.isIntersecting) {
        entry.target.classList.add('animate');
        observer.unobserve(entry.target);
      }
    });
  }, { threshold: 0.1, rootMargin: '0px 0px -100px 0px' });

  document.querySelectorAll('.animate-on-scroll').forEach(el => observer.observe(el));
</script>
""",
    "accessibility": """
/* Accessibility Features */
:focus-visible {
  outline: 3px solid #4F46E5;
  outline-offset: 2px;
}

.sr-only {
  position: absolute;
  width: 1px;
  height: 1px;
  padding: 0;
  margin: -1px;
  overflow: hidden;
  clip: rect(0, 0, 0, 0);
  white-space: nowrap;
  border-width: 0;
}

.skip-link {
  position: absolute;
  top: -40px;
  left: 0;
  background: #000;
  color: #fff;
  padding: 8px;
  z-index: 100;
}

.skip-link:focus {
  top: 0;
}
""",
    "performance": """
/* Performance Optimizations */
<link rel="preconnect" href="https://fonts.googleapis.com">
<img loading="lazy" src="..." alt="...">

@media (prefers-reduced-motion: reduce) {
  * {
    animation-duration: 0.01ms !important;
    animation-iteration-count: 1 !important;
    transition-duration: 0.01ms !important;
  }
}

.section {
  contain: layout style paint;
}
""",
    "seo": """
<!-- SEO Meta Tags -->
<meta name="description" content="...">
<meta property="og:title" content="...">
<meta property="og:description" content="...">
<meta property="og:image" content="...">
<meta name="twitter:card" content="summary_large_image">

<script type="application/ld+json">
{
  "@context": "https://schema.org",
  "@type": "WebSite",
  "name": "...",
  "url": "..."
}
</script>
""",
}

UI_COMPONENTS: Dict[str, str] = {
    "HERO SECTION": """
<section class="hero">
  <div class="hero-background"><div class="gradient-orb"></div></div>
  <div class="hero-content">
    <h1 class="hero-title">Build <span class="gradient-text">Something Amazing</span></h1>
    <p class="hero-subtitle">Transform your ideas into reality with tools designed for modern teams.</p>
    <div class="hero-cta">
      <a href="#start" class="btn btn-primary">Get Started</a>
      <a href="#demo" class="btn btn-secondary">Watch Demo</a>
    </div>
  </div>
  <div class="hero-visual"><img src="hero.webp" alt="Product preview" loading="lazy"></div>
</section>
<style>
  .hero { min-height: 100vh; display: grid; grid-template-columns: 1fr 1fr; align-items: center; gap: 4rem; }
  .gradient-orb { position: absolute; width: 400px; height: 400px; border-radius: 50%; filter: blur(80px); animation: float 20s infinite ease-in-out; }
  .btn-primary:hover { transform: translateY(-2px); box-shadow: 0 10px 30px rgba(102, 126, 234, 0.4); }
  @media (max-width: 768px) { .hero { grid-template-columns: 1fr; text-align: center; } }
</style>
""",
    "NAVIGATION": """
<nav class="navbar" aria-label="Main navigation">
  <a href="/" class="logo">Brand</a>
  <button class="menu-toggle" aria-expanded="false" aria-controls="nav-menu" aria-label="Toggle menu">
    <span class="hamburger"></span>
  </button>
  <ul id="nav-menu" class="nav-menu">
    <li><a href="#features">Features</a></li>
    <li><a href="#pricing">Pricing</a></li>
    <li><a href="#contact">Contact</a></li>
  </ul>
</nav>
<style>
  .navbar { position: sticky; top: 0; display: flex; justify-content: space-between; align-items: center; backdrop-filter: blur(10px); }
  .nav-menu { display: flex; gap: 2rem; list-style: none; }
  @media (max-width: 768px) { .nav-menu { display: none; } .nav-menu.open { display: flex; flex-direction: column; } }
</style>
""",
    "FEATURE SECTION": """
<section class="features" id="features">
  <h2 class="section-title">Everything you need</h2>
  <div class="features-grid">
    <article class="feature-card">
      <div class="feature-icon" aria-hidden="true">&#9889;</div>
      <h3>Lightning Fast</h3>
      <p>Optimized performance so your pages load in milliseconds.</p>
    </article>
  </div>
</section>
<style>
  .features-grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(280px, 1fr)); gap: 2rem; }
  .feature-card { padding: 2rem; border-radius: 1rem; transition: transform 0.3s ease, box-shadow 0.3s ease; }
  .feature-card:hover { transform: translateY(-8px); box-shadow: 0 20px 40px rgba(0, 0, 0, 0.1); }
</style>
""",
    "FOOTER": """
<footer class="footer">
  <div class="footer-content">
    <div class="footer-brand"><a href="/" class="logo">Brand</a><p>Building the future, one pixel at a time.</p></div>
    <div class="footer-links"><a href="#privacy">Privacy</a><a href="#terms">Terms</a></div>
    <form class="newsletter-form"><label for="email" class="sr-only">Email</label><input id="email" type="email" required><button type="submit">Subscribe</button></form>
  </div>
  <div class="footer-bottom"><p>&copy; <span id="year"></span> Brand. All rights reserved.</p></div>
</footer>
<style>
  .footer-content { display: grid; grid-template-columns: 2fr 1fr 1fr; gap: 3rem; }
  .footer-links a:hover { color: white; }
  @media (max-width: 768px) { .footer-content { grid-template-columns: 1fr; gap: 2rem; } }
</style>
""",
}


def generate_enhanced_prompt(config: EnhancedPromptConfig) -> str:
    """Build the full generation prompt for a style/colour configuration"""
    style = config.style or "modern"
    principles = DESIGN_PRINCIPLES.get(style, DESIGN_PRINCIPLES["modern"])
    principle_lines = "\n".join(f"- {key.upper()}: {value}" for key, value in principles.items())

    prompt = f"""
Create a stunning, production-ready website with the following specifications:

USER REQUEST: {config.base_prompt}

DESIGN STYLE: {style.upper()}
{principle_lines}

MANDATORY REQUIREMENTS:
1. Use semantic HTML5 elements throughout
2. Implement a mobile-first responsive design
3. Include smooth animations and transitions
4. Ensure WCAG 2.1 AA accessibility compliance
5. Optimize for performance (lazy loading, efficient CSS)
6. Use modern CSS features (Grid, Flexbox, Custom Properties)
7. Include interactive JavaScript functionality
8. Implement proper SEO meta tags

COLOR SCHEME: {config.color_scheme or "vibrant"}
- Use a cohesive color palette with proper contrast ratios
- Include hover states and focus indicators
- Use CSS custom properties for easy theming

TYPOGRAPHY:
- Use modern, web-safe font stacks
- Implement a clear typographic hierarchy
- Use clamp() for responsive font sizes
- Ensure readability with proper line-height and letter-spacing

LAYOUT REQUIREMENTS:
- Hero section with compelling visuals
- Clear navigation with mobile menu
- Feature sections with engaging layouts
- Social proof section (testimonials/logos)
- Call-to-action sections throughout
- Comprehensive footer with links and newsletter

INTERACTIVITY LEVEL: {config.interactivity or "high"}
- Smooth scroll behavior
- Interactive hover effects
- Form validation and feedback
- Loading states and transitions
- Micro-interactions for engagement

PERFORMANCE OPTIMIZATIONS:
- Inline critical CSS
- Lazy load images and content
- Use efficient selectors
- Minimize reflows and repaints
- Implement smooth 60fps animations

CODE QUALITY:
- Well-commented and organized code
- Consistent naming conventions
- Modular CSS architecture
- Progressive enhancement approach
- Cross-browser compatibility
"""

    if config.template:
        prompt += f"\nTEMPLATE: {config.template}\n"

    if config.features:
        prompt += "\n\nADDITIONAL FEATURES:\n"
        for feature in config.features:
            prompt += f"- {feature}\n"

    for name in ("animations", "accessibility", "performance", "seo"):
        if getattr(config, name):
            prompt += f"\n{ADVANCED_FEATURES[name]}"

    prompt += "\n\nUI COMPONENT EXAMPLES TO REFERENCE:\n"
    for title, code in UI_COMPONENTS.items():
        prompt += f"\n{title} EXAMPLE:\n{code}"

    return prompt
