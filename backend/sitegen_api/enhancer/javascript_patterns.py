"""Catalogue of interactive JavaScript patterns and keyword-based feature detection"""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class JavaScriptPattern:
    name: str
    description: str
    keywords: List[str]
    implementation: str
    best_practices: List[str] = field(default_factory=list)


JAVASCRIPT_PATTERNS: List[JavaScriptPattern] = [
    JavaScriptPattern(
        name="Smooth Scroll Navigation",
        description="Smooth scrolling to page sections with active state tracking",
        keywords=["navigation", "scroll", "menu", "navbar"],
        implementation="""
document.addEventListener('DOMContentLoaded', function() {
  const navLinks = document.querySelectorAll('nav a[href^="#"]');
  navLinks.forEach(link => {
    link.addEventListener('click', function(e) {
      e.preventDefault();
      const target = document.querySelector(this.getAttribute('href'));
      if (target) {
        target.scrollIntoView({ behavior: 'smooth', block: 'start' });
      }
    });
  });

  const sections = document.querySelectorAll('section[id]');
  window.addEventListener('scroll', function() {
    let current = '';
    sections.forEach(section => {
      if (window.pageYOffset >= section.offsetTop - 120) {
        current = section.getAttribute('id');
      }
    });
    navLinks.forEach(link => {
      link.classList.toggle('active', link.getAttribute('href') === '#' + current);
    });
  });
});
""",
        best_practices=[
            "Use debouncing for scroll events",
            "Add keyboard navigation support",
            "Ensure accessibility with ARIA attributes",
            "Handle edge cases for mobile devices",
        ],
    ),
    JavaScriptPattern(
        name="Form Validation",
        description="Comprehensive form validation with real-time feedback",
        keywords=["form", "validation", "input", "submit", "contact"],
        implementation="""
class FormValidator {
  constructor(form) {
    this.form = form;
    this.rules = {
      name: { required: true, minLength: 2, message: 'Please enter your name' },
      email: { required: true, pattern: /^[^\\s@]+@[^\\s@]+\\.[^\\s@]+$/, message: 'Please enter a valid email' },
      message: { required: true, minLength: 10, message: 'Message must be at least 10 characters' }
    };
    this.form.addEventListener('submit', e => this.handleSubmit(e));
    this.form.querySelectorAll('input, textarea').forEach(field => {
      field.addEventListener('blur', () => this.validateField(field));
    });
  }

  validateField(field) {
    const rule = this.rules[field.name];
    if (!rule) return true;
    const value = field.value.trim();
    const valid = (!rule.required || value.length > 0)
      && (!rule.minLength || value.length >= rule.minLength)
      && (!rule.pattern || rule.pattern.test(value));
    field.setAttribute('aria-invalid', String(!valid));
    const error = field.parentElement.querySelector('.error-message');
    if (error) error.textContent = valid ? '' : rule.message;
    return valid;
  }

  async handleSubmit(e) {
    e.preventDefault();
    const fields = Array.from(this.form.querySelectorAll('input, textarea'));
    if (!fields.map(f => this.validateField(f)).every(Boolean)) return;
    const button = this.form.querySelector('[type="submit"]');
    button.disabled = true;
    try {
      await new Promise(resolve => setTimeout(resolve, 1000));
      this.form.reset();
    } catch (err) {
      console.error('Form submission failed', err);
    } finally {
      button.disabled = false;
    }
  }
}
document.querySelectorAll('form[data-validate]').forEach(form => new FormValidator(form));
""",
        best_practices=[
            "Provide immediate visual feedback",
            "Use appropriate input types",
            "Add loading states during submission",
            "Implement proper error handling",
            "Ensure accessibility with ARIA labels",
        ],
    ),
    JavaScriptPattern(
        name="Interactive Image Gallery",
        description="Responsive image gallery with lightbox and filtering",
        keywords=["gallery", "images", "photos", "portfolio", "showcase", "filter"],
        implementation="""
class Gallery {
  constructor(root) {
    this.items = Array.from(root.querySelectorAll('.gallery-item'));
    this.lightbox = document.querySelector('.lightbox');
    this.index = 0;
    root.querySelectorAll('[data-filter]').forEach(btn => {
      btn.addEventListener('click', () => this.filter(btn.dataset.filter));
    });
    this.items.forEach((item, i) => item.addEventListener('click', () => this.open(i)));
    document.addEventListener('keydown', e => {
      if (!this.lightbox.classList.contains('active')) return;
      if (e.key === 'Escape') this.close();
      if (e.key === 'ArrowRight') this.show(this.index + 1);
      if (e.key === 'ArrowLeft') this.show(this.index - 1);
    });
  }
  filter(category) {
    this.items.forEach(item => {
      item.hidden = category !== 'all' && item.dataset.category !== category;
    });
  }
  open(i) { this.lightbox.classList.add('active'); this.show(i); }
  close() { this.lightbox.classList.remove('active'); }
  show(i) {
    this.index = (i + this.items.length) % this.items.length;
    const img = this.items[this.index].querySelector('img');
    this.lightbox.querySelector('img').src = img.dataset.full || img.src;
  }
}
document.querySelectorAll('.gallery').forEach(g => new Gallery(g));
""",
        best_practices=[
            "Lazy load images for performance",
            "Add touch gestures for mobile",
            "Implement proper keyboard navigation",
            "Ensure images are optimized",
            "Add loading indicators",
        ],
    ),
    JavaScriptPattern(
        name="Dynamic Shopping Cart",
        description="Full-featured shopping cart with localStorage persistence",
        keywords=["cart", "shopping", "ecommerce", "store", "products"],
        implementation="""
class ShoppingCart {
  constructor() {
    this.items = JSON.parse(localStorage.getItem('cart') || '[]');
    document.querySelectorAll('.add-to-cart').forEach(btn => {
      btn.addEventListener('click', e => this.add(e.target.closest('.product')));
    });
    this.render();
  }
  add(product) {
    const id = product.dataset.id;
    const existing = this.items.find(item => item.id === id);
    if (existing) {
      existing.quantity += 1;
    } else {
      this.items.push({
        id,
        name: product.querySelector('.product-name').textContent,
        price: parseFloat(product.dataset.price),
        quantity: 1
      });
    }
    this.save();
  }
  remove(id) { this.items = this.items.filter(item => item.id !== id); this.save(); }
  total() { return this.items.reduce((sum, item) => sum + item.price * item.quantity, 0); }
  save() { localStorage.setItem('cart', JSON.stringify(this.items)); this.render(); }
  render() {
    const count = this.items.reduce((sum, item) => sum + item.quantity, 0);
    document.querySelectorAll('.cart-count').forEach(el => { el.textContent = count; });
    document.querySelectorAll('.cart-total').forEach(el => { el.textContent = '$' + this.total().toFixed(2); });
  }
}
const cart = new ShoppingCart();
""",
        best_practices=[
            "Persist cart data in localStorage",
            "Add quantity validation",
            "Implement proper price formatting",
            "Add loading states for async operations",
            "Handle edge cases (empty cart, etc.)",
        ],
    ),
    JavaScriptPattern(
        name="Animated Counters",
        description="Number counters that animate when scrolled into view",
        keywords=["counter", "statistics", "numbers", "animation", "stats"],
        implementation="""
function animateCounter(el) {
  const target = parseInt(el.dataset.target, 10);
  const duration = 2000;
  const start = performance.now();
  function step(now) {
    const progress = Math.min((now - start) / duration, 1);
    const eased = 1 - Math.pow(1 - progress, 3);
    el.textContent = Math.floor(eased * target).toLocaleString();
    if (progress < 1) requestAnimationFrame(step);
  }
  requestAnimationFrame(step);
}
const counterObserver = new IntersectionObserver(entries => {
  entries.forEach(entry => {
    if (entry.isIntersecting) {
      animateCounter(entry.target);
      counterObserver.unobserve(entry.target);
    }
  });
}, { threshold: 0.5 });
document.querySelectorAll('.counter').forEach(el => counterObserver.observe(el));
""",
        best_practices=[
            "Use Intersection Observer for performance",
            "Add easing functions for smooth animation",
            "Format numbers appropriately",
            "Consider reduced motion preferences",
        ],
    ),
    JavaScriptPattern(
        name="Tab Component",
        description="Accessible tab component with keyboard navigation",
        keywords=["tabs", "tabbed", "content", "sections"],
        implementation="""
document.querySelectorAll('[role="tablist"]').forEach(tablist => {
  const tabs = Array.from(tablist.querySelectorAll('[role="tab"]'));
  function activate(tab) {
    tabs.forEach(t => {
      const selected = t === tab;
      t.setAttribute('aria-selected', String(selected));
      t.tabIndex = selected ? 0 : -1;
      document.getElementById(t.getAttribute('aria-controls')).hidden = !selected;
    });
    tab.focus();
  }
  tabs.forEach((tab, i) => {
    tab.addEventListener('click', () => activate(tab));
    tab.addEventListener('keydown', e => {
      if (e.key === 'ArrowRight') activate(tabs[(i + 1) % tabs.length]);
      if (e.key === 'ArrowLeft') activate(tabs[(i - 1 + tabs.length) % tabs.length]);
      if (e.key === 'Home') activate(tabs[0]);
      if (e.key === 'End') activate(tabs[tabs.length - 1]);
    });
  });
});
""",
        best_practices=[
            "Follow ARIA authoring practices",
            "Implement full keyboard navigation",
            "Ensure proper focus management",
            "Add transition animations",
        ],
    ),
    JavaScriptPattern(
        name="Modal/Popup",
        description="Accessible modal with focus trap and animations",
        keywords=["modal", "popup", "dialog", "overlay"],
        implementation="""
class Modal {
  constructor(el) {
    this.el = el;
    this.lastFocused = null;
    el.querySelectorAll('[data-close]').forEach(btn => btn.addEventListener('click', () => this.close()));
    el.addEventListener('keydown', e => this.trap(e));
  }
  open() {
    this.lastFocused = document.activeElement;
    this.el.classList.add('open');
    this.el.setAttribute('aria-hidden', 'false');
    document.body.style.overflow = 'hidden';
    const first = this.focusable()[0];
    if (first) first.focus();
  }
  close() {
    this.el.classList.remove('open');
    this.el.setAttribute('aria-hidden', 'true');
    document.body.style.overflow = '';
    if (this.lastFocused) this.lastFocused.focus();
  }
  focusable() {
    return Array.from(this.el.querySelectorAll('a[href], button, input, textarea, select, [tabindex]:not([tabindex="-1"])'));
  }
  trap(e) {
    if (e.key === 'Escape') return this.close();
    if (e.key !== 'Tab') return;
    const items = this.focusable();
    const first = items[0];
    const last = items[items.length - 1];
    if (e.shiftKey && document.activeElement === first) { e.preventDefault(); last.focus(); }
    else if (!e.shiftKey && document.activeElement === last) { e.preventDefault(); first.focus(); }
  }
}
document.querySelectorAll('[data-modal-target]').forEach(trigger => {
  const modal = new Modal(document.querySelector(trigger.dataset.modalTarget));
  trigger.addEventListener('click', () => modal.open());
});
""",
        best_practices=[
            "Implement focus trap for accessibility",
            "Add smooth animations",
            "Ensure keyboard navigation works",
            "Prevent body scroll when open",
            "Announce state changes to screen readers",
        ],
    ),
    JavaScriptPattern(
        name="Accordion/Collapsible",
        description="Accessible accordion with smooth animations",
        keywords=["accordion", "collapsible", "faq", "expandable"],
        implementation="""
document.querySelectorAll('.accordion').forEach(accordion => {
  const allowMultiple = accordion.hasAttribute('data-multiple');
  accordion.querySelectorAll('.accordion-trigger').forEach(trigger => {
    trigger.addEventListener('click', () => {
      const expanded = trigger.getAttribute('aria-expanded') === 'true';
      if (!allowMultiple) {
        accordion.querySelectorAll('.accordion-trigger').forEach(other => {
          other.setAttribute('aria-expanded', 'false');
          document.getElementById(other.getAttribute('aria-controls')).style.maxHeight = null;
        });
      }
      const panel = document.getElementById(trigger.getAttribute('aria-controls'));
      trigger.setAttribute('aria-expanded', String(!expanded));
      panel.style.maxHeight = expanded ? null : panel.scrollHeight + 'px';
    });
  });
});
""",
        best_practices=[
            "Use semantic HTML and ARIA",
            "Add smooth height animations",
            "Support keyboard navigation",
            "Allow single or multiple open items",
            "Ensure content is accessible when closed",
        ],
    ),
    JavaScriptPattern(
        name="Infinite Scroll",
        description="Load more content as user scrolls",
        keywords=["scroll", "infinite", "pagination", "load more"],
        implementation="""
class InfiniteScroll {
  constructor(container, sentinel, pageSize = 9) {
    this.container = container;
    this.page = 0;
    this.pageSize = pageSize;
    this.loading = false;
    this.observer = new IntersectionObserver(entries => {
      if (entries[0].isIntersecting) this.loadMore();
    });
    this.observer.observe(sentinel);
  }
  async fetchPage(page) {
    await new Promise(resolve => setTimeout(resolve, 500));
    return Array.from({ length: this.pageSize }, (_, i) => ({
      title: `Item ${page * this.pageSize + i + 1}`,
      description: `Description for item ${page * this.pageSize + i + 1}`
    }));
  }
  async loadMore() {
    if (this.loading) return;
    this.loading = true;
    try {
      const items = await this.fetchPage(this.page++);
      const fragment = document.createDocumentFragment();
      items.forEach(item => {
        const card = document.createElement('article');
        card.className = 'card';
        card.innerHTML = `<h3>${item.title}</h3><p>${item.description}</p>`;
        fragment.appendChild(card);
      });
      this.container.appendChild(fragment);
    } catch (err) {
      console.error('Failed to load more items', err);
    } finally {
      this.loading = false;
    }
  }
}
""",
        best_practices=[
            "Use Intersection Observer for performance",
            "Add loading indicators",
            "Handle errors gracefully",
            "Implement proper pagination",
            "Consider accessibility implications",
        ],
    ),
    JavaScriptPattern(
        name="Dark Mode Toggle",
        description="Theme switcher with system preference detection",
        keywords=["dark", "theme", "toggle", "mode", "light"],
        implementation="""
const themeToggle = document.querySelector('.theme-toggle');
const prefersDark = window.matchMedia('(prefers-color-scheme: dark)');
function applyTheme(theme) {
  document.documentElement.setAttribute('data-theme', theme);
  if (themeToggle) themeToggle.setAttribute('aria-pressed', String(theme === 'dark'));
}
applyTheme(localStorage.getItem('theme') || (prefersDark.matches ? 'dark' : 'light'));
if (themeToggle) {
  themeToggle.addEventListener('click', () => {
    const next = document.documentElement.getAttribute('data-theme') === 'dark' ? 'light' : 'dark';
    localStorage.setItem('theme', next);
    applyTheme(next);
  });
}
prefersDark.addEventListener('change', e => {
  if (!localStorage.getItem('theme')) applyTheme(e.matches ? 'dark' : 'light');
});
""",
        best_practices=[
            "Respect system preferences",
            "Save user preference",
            "Add smooth transitions",
            "Update meta theme color",
            "Provide keyboard shortcuts",
        ],
    ),
]


def detect_required_features(prompt: str) -> List[str]:
    """Names of every pattern with a keyword found in the prompt, in catalogue order"""
    prompt_lower = prompt.lower()
    return [
        pattern.name for pattern in JAVASCRIPT_PATTERNS
        if any(keyword in prompt_lower for keyword in pattern.keywords)
    ]


def get_feature_implementation(feature_name: str) -> str:
    for pattern in JAVASCRIPT_PATTERNS:
        if pattern.name == feature_name:
            return pattern.implementation
    return ""


def get_all_feature_names() -> List[str]:
    return [pattern.name for pattern in JAVASCRIPT_PATTERNS]
