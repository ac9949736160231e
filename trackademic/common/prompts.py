"""Prompts sent to the model backends."""


SOLVE_MATH_PROMPT = """You are a brilliant math expert. Your task is to solve the following mathematical problem and provide a detailed, step-by-step explanation of how to arrive at the solution.

Problem: "{equation}"

First, solve the problem to find the final answer.
Then, break down the solution into clear, easy-to-follow steps.

Provide the final solution and the steps in the specified JSON format. For example, for "2x + 5 = 15", the output should be:
{{
  "solution": "x = 5",
  "steps": [
    "Subtract 5 from both sides of the equation: 2x + 5 - 5 = 15 - 5",
    "Simplify the equation: 2x = 10",
    "Divide both sides by 2: 2x / 2 = 10 / 2",
    "The final answer is x = 5"
  ]
}}

Respond with ONLY the JSON object, without any explanations or surrounding text."""


def get_solve_math_prompt(equation: str) -> str:
    """
    Generate the math solving prompt.

    Args:
        equation: The problem statement, embedded verbatim

    Returns:
        Formatted prompt string
    """
    return SOLVE_MATH_PROMPT.format(equation=equation)
