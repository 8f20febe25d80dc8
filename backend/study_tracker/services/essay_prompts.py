"""
Study Tracker - Essay Prompt Catalogue
General Paper style essay prompts with a deterministic prompt of the day.

Technology prompts are shown six days in ten; the remaining days rotate
through the other categories.
"""
import random
from datetime import date

TECHNOLOGY = "technology"

ESSAY_PROMPTS: dict[str, list[str]] = {
    TECHNOLOGY: [
        "How is artificial intelligence transforming healthcare, and what ethical concerns arise from AI-powered medical diagnoses?",
        "Should social media platforms be held legally responsible for the content shared by their users?",
        "Is the development of autonomous vehicles worth the ethical dilemmas they present?",
        "Should governments implement stricter regulations on data privacy?",
        "Is remote work technology creating a better work-life balance or blurring the boundaries?",
        "Evaluate the role of technology in education. Are digital learning platforms democratizing knowledge or creating new inequalities?",
        "How do recommendation algorithms shape our media consumption and worldview?",
        "Is facial recognition technology a tool for security or a threat to civil liberties?",
        "Should tech companies be broken up to prevent monopolistic practices?",
        "Evaluate the environmental impact of technology. Are data centers sustainable?",
        "How do deepfakes threaten information integrity, and how should societies respond?",
        "Should space exploration be left to private companies?",
    ],
    "society": [
        "Is universal basic income a solution to automation-driven unemployment?",
        "Should voting be made compulsory in democratic societies?",
        "Is economic inequality a necessary byproduct of capitalism?",
        "How has globalization affected cultural identity and diversity?",
        "Is the gig economy empowering workers or creating a new form of exploitation?",
    ],
    "environment": [
        "Can technology solve climate change, or do we need fundamental changes in consumption patterns?",
        "Should nuclear energy be part of the renewable energy transition?",
        "How effective are carbon taxes compared with other policies for reducing emissions?",
        "Is sustainable development possible, or does economic growth inevitably harm the environment?",
    ],
    "education": [
        "Should education systems prioritize STEM subjects over the humanities?",
        "How has the internet changed the nature of expertise and authority?",
        "Is the traditional university model becoming obsolete?",
        "Should programming be taught as a core subject in schools?",
    ],
}

CATEGORIES = list(ESSAY_PROMPTS)


def get_daily_topic(today: date | None = None) -> dict[str, str]:
    """Prompt of the day; the same date always yields the same prompt."""
    today = today or date.today()
    day_of_year = today.timetuple().tm_yday
    
    if day_of_year % 10 < 6:
        category = TECHNOLOGY
    else:
        others = [c for c in CATEGORIES if c != TECHNOLOGY]
        category = others[(day_of_year // 10) % len(others)]
    
    prompts = ESSAY_PROMPTS[category]
    return {"category": category, "prompt": prompts[day_of_year % len(prompts)]}


def get_random_topic(rng: random.Random | None = None) -> dict[str, str]:
    """A random prompt from a random category."""
    rng = rng or random
    category = rng.choice(CATEGORIES)
    return {"category": category, "prompt": rng.choice(ESSAY_PROMPTS[category])}


def get_topics_by_category(category: str) -> list[str]:
    """All prompts in a category (empty for an unknown category)."""
    return list(ESSAY_PROMPTS.get(category, []))
