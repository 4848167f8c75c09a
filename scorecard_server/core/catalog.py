"""Reference catalog of scorecard categories and skills"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

MANUAL = "manual"
SELENIUM = "selenium"
CYPRESS = "cypress"
PLAYWRIGHT = "playwright"

ALL_TARGETS = (MANUAL, SELENIUM, CYPRESS, PLAYWRIGHT)


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    applicable_to: Tuple[str, ...]


@dataclass(frozen=True)
class Skill:
    id: str
    name: str
    category: str
    applicable_to: Tuple[str, ...]
    description: Tuple[str, ...] = ()


CATEGORIES: Tuple[Category, ...] = (
    # General categories (applicable to all)
    Category("general-programming", "General Programming", ALL_TARGETS),
    Category("testing-fundamentals", "Testing Fundamentals", ALL_TARGETS),
    Category("problem-solving", "Problem Solving", ALL_TARGETS),
    Category("manual-testing", "Manual Testing", (MANUAL,)),
    Category("selenium-specific", "Selenium Specific", (SELENIUM,)),
    Category("cypress-specific", "Cypress Specific", (CYPRESS,)),
    Category("playwright-specific", "Playwright Specific", (PLAYWRIGHT,)),
)

SKILLS: Tuple[Skill, ...] = (
    # General Programming
    Skill(
        "javascript-basics", "JavaScript Basics", "general-programming", ALL_TARGETS,
        (
            "Understanding of variables, functions, and basic syntax",
            "Knowledge of data types (strings, numbers, booleans, objects)",
            "Ability to write simple scripts and understand code flow",
            "Familiarity with ES6+ features (arrow functions, destructuring)",
        ),
    ),
    Skill(
        "css-selectors", "CSS Selectors", "general-programming", ALL_TARGETS,
        (
            "Understanding of CSS selector syntax and specificity",
            "Knowledge of element, class, ID, and attribute selectors",
            "Ability to write complex selectors for precise targeting",
            "Understanding of pseudo-selectors and combinators",
        ),
    ),
    Skill(
        "html-knowledge", "HTML Knowledge", "general-programming", ALL_TARGETS,
        (
            "Understanding of HTML structure and semantic elements",
            "Knowledge of forms, inputs, and user interaction elements",
            "Understanding of accessibility attributes and best practices",
            "Ability to identify and work with different HTML elements",
        ),
    ),
    # Testing Fundamentals
    Skill(
        "test-design", "Test Design", "testing-fundamentals", ALL_TARGETS,
        (
            "Ability to create comprehensive test cases and scenarios",
            "Understanding of test coverage and risk-based testing",
            "Knowledge of positive and negative test cases",
            "Ability to design tests for different user personas and workflows",
        ),
    ),
    Skill(
        "bug-reporting", "Bug Reporting", "testing-fundamentals", ALL_TARGETS,
        (
            "Ability to write clear, detailed bug reports with steps to reproduce",
            "Understanding of bug severity and priority classification",
            "Knowledge of bug tracking tools and workflows",
            "Ability to provide screenshots, logs, and supporting evidence",
        ),
    ),
    Skill("test-planning", "Test Planning", "testing-fundamentals", ALL_TARGETS),
    # Problem Solving
    Skill("debugging-skills", "Debugging Skills", "problem-solving", ALL_TARGETS),
    Skill("analytical-thinking", "Analytical Thinking", "problem-solving", ALL_TARGETS),
    # Manual Testing
    Skill(
        "exploratory-testing", "Exploratory Testing", "manual-testing", (MANUAL,),
        (
            "Ability to perform ad-hoc testing without predefined test cases",
            "Understanding of session-based testing and charter creation",
            "Skills in discovering defects through systematic exploration",
            "Ability to adapt testing approach based on findings",
        ),
    ),
    Skill(
        "usability-testing", "Usability Testing", "manual-testing", (MANUAL,),
        (
            "Understanding of user experience principles and usability heuristics",
            "Ability to evaluate interface design and user workflows",
            "Skills in identifying usability issues and accessibility problems",
            "Experience with user-centered testing approaches",
        ),
    ),
    # Selenium Specific
    Skill(
        "selenium-webdriver", "Selenium WebDriver", "selenium-specific", (SELENIUM,),
        (
            "Understanding of WebDriver architecture and browser automation",
            "Knowledge of WebDriver API methods and commands",
            "Ability to interact with web elements (click, type, select)",
            "Understanding of browser-specific drivers and capabilities",
        ),
    ),
    Skill("selenium-grid", "Selenium Grid", "selenium-specific", (SELENIUM,)),
    Skill("selenium-waits", "Selenium Waits", "selenium-specific", (SELENIUM,)),
    # Cypress Specific
    Skill(
        "cypress-basics", "Cypress Basics", "cypress-specific", (CYPRESS,),
        (
            "Understanding of Cypress architecture and test runner",
            "Knowledge of Cypress commands and API methods",
            "Ability to write and execute Cypress tests",
            "Understanding of Cypress debugging and time-travel features",
        ),
    ),
    Skill("cypress-fixtures", "Cypress Fixtures", "cypress-specific", (CYPRESS,)),
    Skill("cypress-commands", "Cypress Commands", "cypress-specific", (CYPRESS,)),
    # Playwright Specific
    Skill(
        "playwright-basics", "Playwright Basics", "playwright-specific", (PLAYWRIGHT,),
        (
            "Understanding of Playwright architecture and multi-browser support",
            "Knowledge of Playwright API and page object model",
            "Ability to write cross-browser tests with Playwright",
            "Understanding of Playwright auto-waiting and retry mechanisms",
        ),
    ),
    Skill("playwright-trace", "Playwright Trace", "playwright-specific", (PLAYWRIGHT,)),
    Skill("playwright-debugging", "Playwright Debugging", "playwright-specific", (PLAYWRIGHT,)),
)


def _is_applicable(applicable_to, specialization: Optional[str], automation_tools) -> bool:
    if specialization == MANUAL:
        return MANUAL in applicable_to
    if specialization == "automation":
        return any(tool in applicable_to for tool in automation_tools)
    return False


def applicable_skills(specialization: Optional[str], automation_tools=()) -> List[Skill]:
    """Skills that apply to a specialization and tool selection, in catalog order"""
    return [s for s in SKILLS if _is_applicable(s.applicable_to, specialization, automation_tools)]


def applicable_categories(specialization: Optional[str], automation_tools=()) -> List[Category]:
    """Categories that apply to a specialization and tool selection, in catalog order"""
    return [c for c in CATEGORIES if _is_applicable(c.applicable_to, specialization, automation_tools)]


def get_skill(skill_id: str) -> Optional[Skill]:
    for skill in SKILLS:
        if skill.id == skill_id:
            return skill
    return None


def get_category(category_id: str) -> Optional[Category]:
    for category in CATEGORIES:
        if category.id == category_id:
            return category
    return None


def skills_for_category(category_id: str) -> List[Skill]:
    return [s for s in SKILLS if s.category == category_id]
