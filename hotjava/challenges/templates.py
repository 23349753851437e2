"""Curated challenges used when no AI provider is available."""

import logging
import random

logger = logging.getLogger(__name__)

# Items use the generator wire format plus a "tags" list for topic matching.
CHALLENGE_TEMPLATES: list[dict] = [
    # Python
    {
        "tags": ["python", "loops", "basics"],
        "question": "Loop over a range",
        "description": "Print the numbers 0 to 4.",
        "code_with_gaps": "__GAP__ i in range(5):\n    print(i)",
        "full_solution": "for i in range(5):\n    print(i)",
        "gap_answers": ["for"],
        "explanation": "A for loop walks every value range() produces.",
    },
    {
        "tags": ["python", "functions", "basics"],
        "question": "Define a function",
        "description": "Write a function that doubles its argument.",
        "code_with_gaps": "__GAP__ double(x):\n    __GAP__ x * 2",
        "full_solution": "def double(x):\n    return x * 2",
        "gap_answers": ["def", "return"],
        "explanation": "def declares the function and return hands back the result.",
    },
    {
        "tags": ["python", "comprehensions", "lists"],
        "question": "Square with a comprehension",
        "description": "Build a list of squares for 1 to 3.",
        "code_with_gaps": "squares = [n * n __GAP__ n in [1, 2, 3]]",
        "full_solution": "squares = [n * n for n in [1, 2, 3]]",
        "gap_answers": ["for"],
        "explanation": "List comprehensions read like a for loop inside brackets.",
    },
    {
        "tags": ["python", "dictionaries", "basics"],
        "question": "Read a dictionary safely",
        "description": "Fetch the 'name' key, defaulting to 'anon'.",
        "code_with_gaps": "name = user.__GAP__(\"name\", \"anon\")",
        "full_solution": "name = user.get(\"name\", \"anon\")",
        "gap_answers": ["get"],
        "explanation": "dict.get returns the default instead of raising KeyError.",
    },
    # JavaScript
    {
        "tags": ["javascript", "js", "variables", "basics"],
        "question": "Declare a constant",
        "description": "Bind a value that never gets reassigned.",
        "code_with_gaps": "__GAP__ answer = 42;",
        "full_solution": "const answer = 42;",
        "gap_answers": ["const"],
        "explanation": "const prevents reassignment of the binding.",
    },
    {
        "tags": ["javascript", "js", "arrays", "functions"],
        "question": "Map over an array",
        "description": "Double every number in the array.",
        "code_with_gaps": "const doubled = nums.__GAP__(n => n * 2);",
        "full_solution": "const doubled = nums.map(n => n * 2);",
        "gap_answers": ["map"],
        "explanation": "map builds a new array from the callback's return values.",
    },
    {
        "tags": ["javascript", "js", "async", "promises"],
        "question": "Wait for a promise",
        "description": "Fetch a URL inside an async function.",
        "code_with_gaps": "__GAP__ function load(url) {\n  const res = __GAP__ fetch(url);\n  return res.json();\n}",
        "full_solution": "async function load(url) {\n  const res = await fetch(url);\n  return res.json();\n}",
        "gap_answers": ["async", "await"],
        "explanation": "await only works inside functions marked async.",
    },
    # React
    {
        "tags": ["react", "hooks", "javascript"],
        "question": "Hold some state",
        "description": "Create a counter that starts at zero.",
        "code_with_gaps": "const [count, setCount] = __GAP__(0);",
        "full_solution": "const [count, setCount] = useState(0);",
        "gap_answers": ["useState"],
        "explanation": "useState returns the value and its setter as a pair.",
    },
    # Java
    {
        "tags": ["java", "classes", "basics"],
        "question": "Declare a class",
        "description": "Start a public class named Cup.",
        "code_with_gaps": "__GAP__ class Cup {\n}",
        "full_solution": "public class Cup {\n}",
        "gap_answers": ["public"],
        "explanation": "public makes the class visible to every package.",
    },
    {
        "tags": ["java", "loops"],
        "question": "Count with a for loop",
        "description": "Loop i from 0 while it is below 3.",
        "code_with_gaps": "for (int i = 0; i __GAP__ 3; i++) {\n  System.out.println(i);\n}",
        "full_solution": "for (int i = 0; i < 3; i++) {\n  System.out.println(i);\n}",
        "gap_answers": ["<"],
        "explanation": "The loop runs while the condition i < 3 holds.",
    },
    # SQL
    {
        "tags": ["sql", "queries", "databases"],
        "question": "Filter rows",
        "description": "Select users older than 30.",
        "code_with_gaps": "SELECT * FROM users __GAP__ age > 30;",
        "full_solution": "SELECT * FROM users WHERE age > 30;",
        "gap_answers": ["WHERE"],
        "explanation": "WHERE keeps only the rows matching the condition.",
    },
]


def get_templates(topic: str) -> list[dict]:
    """Get templates matching any word of a topic.

    Args:
        topic: Free-text topic such as "Python Loops"

    Returns:
        Matching templates, or every template when nothing matches
    """
    words = {word for word in topic.lower().replace("-", " ").split() if word}
    matches = [t for t in CHALLENGE_TEMPLATES if words & set(t["tags"])]
    if not matches:
        logger.warning("No curated challenges tagged for %r; using the whole bank", topic)
        return list(CHALLENGE_TEMPLATES)
    return matches


def pick_templates(topic: str, count: int, seed: int) -> list[dict]:
    """Pick a deterministic selection of templates for a topic and seed."""
    pool = get_templates(topic)
    random.Random(seed).shuffle(pool)
    return pool[:count]
