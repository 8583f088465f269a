# Copyright (c) Syntropy Systems
"""Prompt catalog: fixed questions sent to the model under test."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from typing_extensions import TypeAlias

if TYPE_CHECKING:
    from collections.abc import Mapping

PromptKey: TypeAlias = str

_COMPRESSION = """\
Summarize the following passage into three key points while maintaining the core message:
The Industrial Revolution, which took place from the 18th to 19th centuries, was a period of \
significant technological, socioeconomic, and cultural change. This transformation began in \
Great Britain and quickly spread throughout Western Europe and North America. The transition \
included going from manual production methods to machines, new chemical manufacturing and iron \
production processes, improved efficiency of water power, the increasing use of steam power, and \
the development of machine tools. It also included the change from wood and other biofuels to \
coal. The textile industry was the first to adopt such changes, as cotton spinning was \
mechanized. The Industrial Revolution marked a major turning point in human history, as almost \
every aspect of daily life was influenced in some way. It influenced the manufacture of new \
types of tools, the rise of the factory system, and important technological innovations in \
transportation and communication methods."""

_CONVERSION = """\
Convert the following natural language query into a proper SQL query. The database has tables \
for 'employees' (columns: employee_id, name, department, salary, hire_date) and 'departments' \
(columns: department_id, department_name, location):
Show me all employees who work in the Marketing department and earn more than $60,000, ordered \
by their hire date with the most recent hires first"""

_SEEKER = """\
Below are quarterly revenue figures for TechCorp in 2024:
Q1: Revenue: $2.3M, Operating Costs: $1.8M
Q2: Revenue: $2.8M, Operating Costs: $2.1M
Q3: Revenue: $3.1M, Operating Costs: $2.4M
Q4: Revenue: $2.9M, Operating Costs: $2.2M
Which quarter had the highest profit margin (revenue minus operating costs divided by \
revenue)? Show your calculations."""

_ACTION = """\
Given this user feedback for a mobile banking app:
User 1: 'Takes forever to log in with fingerprint, often fails 3-4 times'
User 2: 'Love the new bill pay feature but can't find it easily'
User 3: 'App crashes when I try to view my statements'
User 4: 'Great app overall but fingerprint login is frustrating'
User 5: 'The menu structure is confusing, too many clicks to pay bills'
Identify the top 3 issues that need immediate attention, prioritize them based on user impact \
and frequency, and provide specific technical recommendations to address each issue."""

_REASONING = """\
A startup is deciding between two business models:
Model A:
- Subscription-based: $10/month
- Customer acquisition cost: $20
- Average customer lifetime: 8 months
- Operating cost per customer: $5/month
- Current market size: 100,000 potential customers
- Market growth: 5% annually
Model B:
- One-time purchase: $100
- Customer acquisition cost: $30
- Operating cost per customer: $10 (one-time)
- Current market size: 50,000 potential customers
- Market growth: 15% annually
Which business model should they choose? Provide your analysis and recommendation based on \
profitability, scalability, and long-term sustainability. Show your calculations and reasoning."""

PROMPTS: Mapping[PromptKey, str] = MappingProxyType({
    # Cultural knowledge
    "idiom": "What does the phrase 'beating around the bush' mean?",
    "proverb": "Explain the meaning of 'a stitch in time saves nine'",
    "metaphor": "What does it mean when someone says 'life is a roller coaster'?",
    # Mathematics
    "math_simple": "What is the fastest way to calculate 15% of a number?",
    "math_logic": (
        "If a clock shows 3:15, what is the angle between the hour and minute hands?"
    ),
    "probability": "What are the odds of rolling two sixes with two dice?",
    # Reasoning
    "logic": "If all A are B, and all B are C, what can we conclude about A and C?",
    "causation": "Why does ice float in water?",
    "comparison": "What's the key difference between correlation and causation?",
    # Technical
    "code_concept": "What is a recursive function?",
    "algorithm": "Explain how binary search works",
    "tech_explain": "What is the difference between HTTP and HTTPS?",
    # Scientific
    "physics": "Why do we see lightning before we hear thunder?",
    "chemistry": "Why does salt dissolve in water?",
    "biology": "What is the main function of red blood cells?",
    # Language
    "grammar": "When should we use 'who' versus 'whom'?",
    "synonym": "What's the difference between 'eager' and 'anxious'?",
    "context": (
        "In the phrase 'bank account' and 'river bank', what causes the different "
        "meanings of 'bank'?"
    ),
    # Practical
    "finance": "What's the difference between a debit card and a credit card?",
    "health": "Why is breakfast considered important?",
    "technology": "What's the purpose of a CPU in a computer?",
    # Multilingual
    "translation": (
        "Translate 'Welcome to the future of AI' into French, Japanese, and Arabic."
    ),
    "multilingual": (
        "Respond to this question in Spanish: What are the key benefits of "
        "renewable energy?"
    ),
    "local_context": (
        "Explain how the concept of 'time' is viewed differently across various cultures."
    ),
    # Technical deep dives
    "system_design": (
        "Design a high-level architecture for a real-time chat application that "
        "needs to support millions of users."
    ),
    "debug_scenario": (
        "Given a Node.js application with high CPU usage and memory leaks, what steps "
        "would you take to diagnose and fix the issues?"
    ),
    "code_review": (
        "Review this code snippet for potential issues: `function fetchData(callback) "
        "{ const data = getData(); callback(data); }`"
    ),
    # Knowledge integration
    "cross_domain": (
        "Explain how principles of biology could be applied to improve computer "
        "network design."
    ),
    "trend_analysis": (
        "Analyze the intersection of AI advancement and its impact on human "
        "creativity in various fields."
    ),
    "innovation": (
        "Propose a novel solution for reducing urban traffic congestion using "
        "emerging technologies."
    ),
    # Advanced mathematics
    "math_complex": (
        "Solve this calculus problem: Find the volume of the solid obtained by "
        "rotating the region bounded by y = x², y = 2x, and the y-axis about the "
        "x-axis. Show your work and explain each step."
    ),
    "math_proof": (
        "Prove that the square root of 2 is irrational using a proof by "
        "contradiction. Explain your reasoning in detail."
    ),
    "math_optimal": (
        "A company produces two types of products, A and B. Product A requires 2 "
        "hours of labor and 3 units of raw material, while Product B requires 3 hours "
        "of labor and 2 units of raw material. The company has 100 hours of labor and "
        "120 units of raw material available. Product A sells for $40 and Product B "
        "for $50. How many of each product should be produced to maximize profit?"
    ),
    # Historical analysis
    "history_cause": (
        "Analyze the primary causes of the Industrial Revolution and their "
        "interconnections. How did these factors influence each other?"
    ),
    "history_compare": (
        "Compare and contrast the Renaissance in Italy and the Golden Age in China. "
        "What were the key similarities and differences in their cultural and "
        "scientific achievements?"
    ),
    # Ethical reasoning
    "ethical_dilemma": (
        "A self-driving car must make a split-second decision: swerve to avoid a "
        "group of pedestrians but put its passenger at risk, or maintain course to "
        "protect its passenger but harm the pedestrians. What ethical frameworks "
        "could guide this decision?"
    ),
    "moral_philosophy": (
        "Compare utilitarian and deontological approaches to privacy rights in the "
        "digital age. How would each framework address data collection practices?"
    ),
    # Music and art theory
    "music_theory": (
        "Explain the concept of modal interchange in music theory. How does it differ "
        "from standard diatonic harmony, and what emotional effects can it create?"
    ),
    "art_analysis": (
        "Analyze the use of perspective, light, and symbolism in Vermeer's \"Girl "
        "with a Pearl Earring\". How do these elements contribute to the painting's "
        "impact?"
    ),
    # Game theory
    "game_strategy": (
        "In a game of prisoner's dilemma repeated 100 times, what would be the "
        "optimal strategy? Consider both theoretical and practical aspects."
    ),
    "game_theory": (
        "Explain how Nash Equilibrium applies to market competition between two "
        "companies setting prices for similar products."
    ),
    # Text transformation
    "expansion": (
        "Write the first two paragraphs of a blog post explaining quantum computing "
        "to teenagers. The post should start with an engaging hook and use relatable "
        "examples from their daily lives. Begin with the title 'Quantum Computing: "
        "Your Phone's Future Superpower?'"
    ),
    "compression": _COMPRESSION,
    "conversion": _CONVERSION,
    "seeker": _SEEKER,
    "action": _ACTION,
    "reasoning": _REASONING,
    # Chain of thought
    "cot": "How many times does the letter 'r' appear in the word 'strawberry'?",
})


def all_prompts() -> list[PromptKey]:
    """Return every prompt key in catalog order."""
    return list(PROMPTS)
