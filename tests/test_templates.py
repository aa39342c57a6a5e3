"""
Tests for template catalogue and keyword-based template selection
"""
from sitegen_api.enhancer.templates import (
    TEMPLATE_IDS,
    get_all_templates,
    get_template,
    get_template_categories,
    get_templates_by_category,
    search_templates,
    select_template,
)


class TestTemplateSelection:
    """Keyword groups are checked in a fixed order and the first hit wins"""

    def test_portfolio_keyword(self):
        assert select_template("A portfolio for a photographer").id == "modern-portfolio"

    def test_saas_keyword(self):
        assert select_template("Landing page for my SaaS analytics tool").id == "saas-landing"

    def test_store_keyword(self):
        assert select_template("An online store for handmade candles").id == "ecommerce-store"

    def test_restaurant_keyword(self):
        assert select_template("Italian restaurant with online menu").id == "restaurant-website"

    def test_business_keyword(self):
        assert select_template("Website for our consulting company").id == "corporate-business"

    def test_earlier_group_wins(self):
        """'personal' (portfolio) is checked before 'business'"""
        assert select_template("Personal business card site").id == "modern-portfolio"

    def test_matching_is_case_insensitive(self):
        assert select_template("RESTAURANT").id == "restaurant-website"

    def test_no_keyword_returns_none(self):
        assert select_template("A page about my cat") is None

    def test_explicit_id_bypasses_keywords(self):
        template = select_template("An online store", template_id="restaurant-website")
        assert template.id == "restaurant-website"

    def test_unknown_explicit_id_does_not_fall_back(self):
        assert select_template("An online store", template_id="does-not-exist") is None


class TestTemplateCatalogue:

    def test_five_templates(self):
        assert TEMPLATE_IDS == [
            "modern-portfolio",
            "saas-landing",
            "ecommerce-store",
            "restaurant-website",
            "corporate-business",
        ]
        assert len(get_all_templates()) == 5

    def test_get_template(self):
        template = get_template("saas-landing")
        assert template.name == "SaaS Landing Page"
        assert template.structure.sections
        assert template.code_patterns.javascript
        assert template.best_practices

    def test_get_unknown_template(self):
        assert get_template("nope") is None

    def test_categories_in_declaration_order(self):
        assert get_template_categories() == ["portfolio", "landing", "ecommerce", "hospitality", "business"]

    def test_templates_by_category(self):
        assert [t.id for t in get_templates_by_category("hospitality")] == ["restaurant-website"]
        assert get_templates_by_category("unknown") == []

    def test_search(self):
        assert "restaurant-website" in [t.id for t in search_templates("Restaurant")]
        assert search_templates("zzz-no-match") == []

    def test_serializes_camel_case(self):
        dumped = get_template("modern-portfolio").model_dump(by_alias=True)
        assert "codePatterns" in dumped
        assert "bestPractices" in dumped
        assert "designPrinciples" in dumped["structure"]
