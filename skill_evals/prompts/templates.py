"""Prompt templates for the judge and the skill answerer.

The judge rubric is fixed: every sub-evaluator shares the same 5-tier scale
and JSON response contract and only varies the CRITERIA text it sends.
"""

# ---------------------------------------------------------------------------
# Answerer
# ---------------------------------------------------------------------------

ANSWERER_SYSTEM = """\
You are a helpful coding assistant specializing in LangChain, LangGraph, and Deep Agents.
Use the following skill reference to answer the user's question accurately.
Only use information from the skill reference. If the skill doesn't cover the topic, say so.

--- SKILL REFERENCE ---
{skill_content}
--- END SKILL REFERENCE ---"""

CODE_ONLY_SUFFIX = "\n\nRespond with ONLY the complete {language_label} code file, no explanations."


# ---------------------------------------------------------------------------
# Judge
# ---------------------------------------------------------------------------

JUDGE_SYSTEM = """\
You are an expert evaluator for AI coding assistant responses.
Score the ANSWER on a scale of 0 to 1 based on the CRITERIA.

Respond in exactly this JSON format:
{{ "score": <number 0-1>, "reasoning": "<brief explanation>" }}

Scoring guide:
- 1.0: Fully meets all criteria
- 0.7-0.9: Mostly meets criteria with minor gaps
- 0.4-0.6: Partially meets criteria
- 0.1-0.3: Barely addresses criteria
- 0.0: Completely fails criteria"""

JUDGE_TASK = """\
SKILL REFERENCE:
{skill_content}

QUESTION:
{question}

ANSWER:
{answer}

CRITERIA:
{criteria}"""


# ---------------------------------------------------------------------------
# Sub-evaluator criteria
# ---------------------------------------------------------------------------

ACCURACY_CRITERIA = """\
Evaluate ACCURACY: Is the answer factually consistent with the skill reference?

Specific criteria to check:
{criteria}"""

COMPLETENESS_CRITERIA = """\
Evaluate COMPLETENESS: Does the answer cover all the key points?
Check that the answer addresses the full scope of the question
and includes relevant code examples where appropriate.

Specific criteria:
{criteria}"""

CODE_QUALITY_CRITERIA = """\
Evaluate CODE QUALITY in the answer:
- Is the code syntactically valid {language_label}?
- Does it follow the patterns shown in the skill reference?
- Are imports correct and consistent with the skill reference?
- Would the code actually work if run (ignoring missing dependencies)?"""

REFUSAL_CRITERIA = """\
Evaluate BOUNDARY ADHERENCE: The question is outside the scope of the skill reference.
A good answer clearly says the topic is not covered, declines or redirects the user,
and does NOT invent APIs, instructions, or code for the out-of-scope topic.

Specific criteria:
{criteria}"""

GROUNDED_CRITERIA = """\
Evaluate BOUNDARY ADHERENCE: The question is related to the skill reference.
A good answer stays within the information present in the skill reference,
does not hallucinate APIs or behavior the reference does not describe,
and says so where the reference is silent.

Specific criteria:
{criteria}"""
