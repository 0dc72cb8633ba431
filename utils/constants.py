"""
Constants and system prompts for the Everywhere Digital School backend.
"""

PERPLEXITY_URL = "https://api.perplexity.ai/chat/completions"

# AI search request parameters
SEARCH_MODEL = "sonar"
SEARCH_TEMPERATURE = 0.2
SEARCH_MAX_TOKENS = 4000
SEARCH_RECENCY_FILTER = "month"

SEARCH_SYSTEM_PROMPT = """És um assistente especializado em análise de mercado e estratégia para a Lisbon Digital School (LDS),
uma escola de formação em competências digitais com sede em Lisboa, Portugal.
A LDS está a realizar uma digressão chamada "Everywhere Digital School" por várias cidades de Portugal.

O teu objectivo é fornecer informação detalhada, actualizada e accionável para ajudar a planear eventos em diferentes localidades.
Responde sempre em Português de Portugal.
Usa formatação Markdown para estruturar a resposta.
Sê específico com nomes de empresas, instituições, contactos e links quando possível.
Baseia as tuas respostas em dados reais e actualizados."""

NO_RESULTS_CONTENT = "Sem resultados disponíveis"

# Error messages returned to clients
PROXY_ERROR_MESSAGE = "Failed to fetch from Perplexity API"
SEARCH_MISSING_FIELDS_MESSAGE = "Query and location are required"
SEARCH_UPSTREAM_FALLBACK_MESSAGE = "AI search failed"
SEARCH_ERROR_PREFIX = "Erro ao fazer pesquisa IA: "
PAGE_NOT_FOUND_MESSAGE = "Page not found"
INVALID_BODY_MESSAGE = "Invalid JSON body"


class Page:
    """Static HTML files served by the page router."""
    APP = "app.html"
    LOGIN = "login.html"
    DEMO = "demo.html"
