"""Prompt templates sent to analysis vendors.

The service answers in Portuguese, so prompts and system messages are
written in Portuguese as well.
"""

from typing import List, Optional

ANALYSIS_SYSTEM = (
    "Você é um assistente especializado em análise de documentos legais e contratos. "
    "Sempre responda em JSON válido."
)
SUMMARY_SYSTEM = (
    "Você é um assistente especializado em resumir documentos legais e contratos "
    "de forma clara e objetiva."
)
SUGGESTIONS_SYSTEM = (
    "Você é um especialista em revisão de documentos legais. "
    "Forneça sugestões práticas e específicas. Sempre responda em JSON válido."
)
COMPLIANCE_SYSTEM = (
    "Você é um especialista em conformidade legal. Seja preciso e objetivo. "
    "Sempre responda em JSON válido."
)


def analysis_prompt(content: str) -> str:
    return f"""Analise o seguinte documento e forneça uma análise estruturada em JSON:

Documento:
{content}

Forneça uma resposta JSON com a seguinte estrutura:
{{
  "summary": "resumo do documento em 2-3 frases",
  "keyPoints": ["ponto 1", "ponto 2", "ponto 3"],
  "riskLevel": "low|medium|high",
  "suggestions": ["sugestão 1", "sugestão 2"],
  "estimatedReadingTime": número em minutos
}}"""


def summary_prompt(content: str) -> str:
    return f"""Gere um resumo conciso e profissional do seguinte documento:

{content}

Resumo:"""


def suggestions_prompt(content: str) -> str:
    return f"""Analise o seguinte documento e sugira melhorias específicas e acionáveis:

{content}

Forneça uma lista JSON com sugestões:
{{
  "suggestions": ["sugestão 1", "sugestão 2", "sugestão 3"]
}}"""


def compliance_prompt(content: str, rules: Optional[List[str]] = None) -> str:
    rules_text = ""
    if rules:
        rules_text = "\n\nRegras de conformidade a verificar:\n" + "\n".join(str(r) for r in rules)
    return f"""Verifique se o seguinte documento está em conformidade com as regras especificadas:

{content}{rules_text}

Forneça uma resposta JSON:
{{
  "compliant": true|false,
  "issues": ["problema 1", "problema 2"]
}}"""
