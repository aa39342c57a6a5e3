"""
Tests for prompt enhancement

Covers the template-driven enhancer, the style-driven prompt builder used by
/api/generate-website, JavaScript feature detection and the per-template
helpers (CSS variables, meta tags, snippets).
"""
from sitegen_api.enhancer.code_requirements import TOTAL_MIN_LINES, generate_code_requirements_prompt
from sitegen_api.enhancer.features import generate_feature_list_prompt, total_estimated_lines
from sitegen_api.enhancer.javascript_patterns import (
    detect_required_features,
    get_all_feature_names,
    get_feature_implementation,
)
from sitegen_api.enhancer.prompt_enhancer import enhance_prompt, enhance_prompt_with_template
from sitegen_api.enhancer.template_utils import (
    generate_css_variables,
    generate_meta_tags,
    generate_template_snippet,
)
from sitegen_api.enhancer.ultra_prompt import EnhancedPromptConfig, generate_enhanced_prompt


class TestFeatureDetection:

    def test_detects_in_catalogue_order(self):
        """Detected names follow the catalogue order, not the prompt order"""
        features = detect_required_features("A photo gallery and a contact form")
        assert features == ["Form Validation", "Interactive Image Gallery"]

    def test_case_insensitive(self):
        assert "Dynamic Shopping Cart" in detect_required_features("SHOPPING for shoes")

    def test_substring_match(self):
        """'scroll' matches both smooth scroll and infinite scroll"""
        features = detect_required_features("parallax scrolling effects")
        assert "Smooth Scroll Navigation" in features
        assert "Infinite Scroll" in features

    def test_no_features(self):
        assert detect_required_features("a plain page about cats") == []

    def test_catalogue(self):
        names = get_all_feature_names()
        assert len(names) == 10
        assert names[0] == "Smooth Scroll Navigation"
        assert names[-1] == "Dark Mode Toggle"
        assert "localStorage" in get_feature_implementation("Dark Mode Toggle")
        assert get_feature_implementation("Unknown") == ""


class TestEnhancePrompt:

    def test_template_path(self):
        """A matched template adds hero, type and final sections"""
        enhanced, template_id = enhance_prompt("Website for my restaurant with a menu")
        assert template_id == "restaurant-website"
        assert "## CRITICAL HERO SECTION REQUIREMENTS" in enhanced
        assert "## Website Type: Restaurant Website" in enhanced
        assert "## FINAL CRITICAL REQUIREMENTS:" in enhanced
        assert "## MANDATORY CODE REQUIREMENTS:" in enhanced
        assert "Website for my restaurant with a menu" in enhanced

    def test_template_path_lists_detected_features(self):
        enhanced, _ = enhance_prompt("Portfolio with an image gallery")
        assert "- Interactive Image Gallery with full functionality and error handling" in enhanced
        assert "for the modern-portfolio template" in enhanced

    def test_generic_path(self):
        """No template match falls back to the generic guidance"""
        enhanced, template_id = enhance_prompt("A page about my cat with a contact form")
        assert template_id is None
        assert enhanced.lstrip().startswith("A page about my cat with a contact form")
        assert "## General Website Requirements:" in enhanced
        assert "- Implement these features: Form Validation" in enhanced
        assert "## MANDATORY CODE REQUIREMENTS:" in enhanced
        assert "## COMPREHENSIVE FEATURE IMPLEMENTATION GUIDE" in enhanced
        assert "## ADVANCED JAVASCRIPT IMPLEMENTATION REQUIREMENTS" in enhanced
        assert "## CRITICAL HERO SECTION REQUIREMENTS" not in enhanced

    def test_explicit_template(self):
        enhanced, template_id = enhance_prompt("Something", template_id="saas-landing")
        assert template_id == "saas-landing"
        assert "## Website Type: SaaS Landing Page" in enhanced

    def test_unknown_explicit_template_is_generic(self):
        enhanced, template_id = enhance_prompt("An online store", template_id="missing")
        assert template_id is None
        assert "## General Website Requirements:" in enhanced

    def test_with_template_returns_string(self):
        enhanced = enhance_prompt_with_template("Corporate site for our company")
        assert isinstance(enhanced, str)
        assert "## Website Type: Corporate Business" in enhanced

    def test_deterministic(self):
        assert enhance_prompt("An online store") == enhance_prompt("An online store")


class TestRequirementBlocks:

    def test_code_requirements(self):
        block = generate_code_requirements_prompt()
        assert f"AT LEAST {TOTAL_MIN_LINES} lines" in block
        assert "### HTML Requirements (Minimum 300 lines):" in block
        assert "### CSS Requirements (Minimum 500 lines):" in block
        assert "### JavaScript Requirements (Minimum 500 lines):" in block

    def test_feature_list(self):
        block = generate_feature_list_prompt("ecommerce-store")
        assert "For the ecommerce-store website" in block
        assert "### Advanced Navigation System" in block
        assert f"Total estimated lines: {total_estimated_lines()}+ lines" in block


class TestStylePrompt:

    def test_defaults(self):
        prompt = generate_enhanced_prompt(EnhancedPromptConfig(base_prompt="A bakery site"))
        assert "USER REQUEST: A bakery site" in prompt
        assert "DESIGN STYLE: MODERN" in prompt
        assert "COLOR SCHEME: vibrant" in prompt
        assert "INTERACTIVITY LEVEL: high" in prompt
        assert "/* Advanced Animation System */" in prompt
        assert "/* Accessibility Features */" in prompt
        assert "<!-- SEO Meta Tags -->" in prompt
        assert "UI COMPONENT EXAMPLES TO REFERENCE:" in prompt
        assert "HERO SECTION EXAMPLE:" in prompt
        assert "TEMPLATE:" not in prompt
        assert "ADDITIONAL FEATURES:" not in prompt

    def test_style_and_options(self):
        prompt = generate_enhanced_prompt(EnhancedPromptConfig(
            base_prompt="A toy shop",
            template="ecommerce-store",
            features=["Wishlist", "Gift cards"],
            style="playful",
            color_scheme="pastel",
            animations=False,
            seo=False,
            interactivity="low",
        ))
        assert "DESIGN STYLE: PLAYFUL" in prompt
        assert "- LAYOUT: Asymmetric layouts" in prompt
        assert "COLOR SCHEME: pastel" in prompt
        assert "INTERACTIVITY LEVEL: low" in prompt
        assert "TEMPLATE: ecommerce-store" in prompt
        assert "ADDITIONAL FEATURES:\n- Wishlist\n- Gift cards\n" in prompt
        assert "/* Advanced Animation System */" not in prompt
        assert "<!-- SEO Meta Tags -->" not in prompt
        assert "/* Accessibility Features */" in prompt

    def test_unknown_style_uses_modern_principles(self):
        prompt = generate_enhanced_prompt(EnhancedPromptConfig(base_prompt="x", style="retro"))
        assert "DESIGN STYLE: RETRO" in prompt
        assert "- LAYOUT: Use CSS Grid and Flexbox" in prompt


class TestTemplateUtils:

    def test_css_variables(self):
        assert "--primary-color: #b91c1c;" in generate_css_variables("restaurant-website")

    def test_css_variables_default(self):
        assert generate_css_variables("unknown") == generate_css_variables("modern-portfolio")

    def test_meta_tags_substitute_name(self):
        tags = generate_meta_tags("saas-landing", "Acme")
        assert "Acme - Transform Your Business" in tags
        assert "{name}" not in tags

    def test_meta_tags_default(self):
        tags = generate_meta_tags("unknown")
        assert "Your Business - Professional Business Services" in tags

    def test_snippets(self):
        assert generate_template_snippet("saas-landing")
        assert generate_template_snippet("restaurant-website") == ""
