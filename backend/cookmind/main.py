"""
FastAPI application entry point and endpoint definitions.

This module initializes the FastAPI application and exposes the ingredient
match and substitution engine to the CookMind mobile client.

Responsibilities:
- Initialize FastAPI application with CORS and error handling
- Build the engine services from settings
- Define the match, substitution, explanation, recipe, timer, inventory
  and product endpoints
"""

from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from typing import List
import logging

from cookmind.config import settings
from cookmind.models.inventory import (
    BasicInventoryItem,
    ProductTagRequest,
    ProductTagResponse,
    VariantCheckRequest,
    VariantCheckResult,
)
from cookmind.models.match import MatchRequest, MatchResponse
from cookmind.models.recipe import (
    AdaptRecipeRequest,
    ParseTimerRequest,
    ParseTimerResponse,
    RankRecipesRequest,
    RankedRecipe,
    Recipe,
)
from cookmind.models.substitution import (
    ExplanationRequest,
    ExplanationResponse,
    SubstitutionRequest,
    SubstitutionResponse,
    SubstitutionResult,
)
from cookmind.services.basic_inventory import (
    basic_inventory_items,
    check_variant,
    find_covered_variants,
)
from cookmind.services.explanation_generator import ExplanationGenerator
from cookmind.services.match_scorer import analyze_match
from cookmind.services.product_tagger import suggest_ingredient_tag
from cookmind.services.recipe_adapter import adapt_recipe
from cookmind.services.recipe_ranker import RecipeRanker
from cookmind.services.substitution_resolver import SubstitutionResolver, SubstitutionTable
from cookmind.utils.timers import format_timer, parse_step_timer
from cookmind.utils.validators import validate_ingredient_list, validate_ingredient_name

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


def create_app() -> FastAPI:
    """
    Initialize and configure the FastAPI application.

    Sets up:
    - CORS middleware for the mobile/web client
    - Exception handler for consistent error responses
    - Application metadata

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title="CookMind Ingredient Match & Substitution API",
        description="Recipe matching against kitchen inventory and ingredient substitution suggestions",
        version=API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],  # Next.js dev server
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(Exception)
    async def global_exception_handler(request, exc):
        """
        Handle all uncaught exceptions with consistent error format.

        Args:
            request: The incoming request object
            exc: The exception that was raised

        Returns:
            JSONResponse: Formatted error response
        """
        logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "Internal server error occurred",
                "error": str(exc)
            }
        )

    return app


def build_resolver() -> SubstitutionResolver:
    """Create the substitution resolver from the configured table."""
    if settings.SUBSTITUTION_TABLE_PATH:
        table = SubstitutionTable.from_json(settings.SUBSTITUTION_TABLE_PATH)
    else:
        table = SubstitutionTable.default()
    return SubstitutionResolver(table, fallback=settings.FALLBACK_SUGGESTION_TEXT)


# Initialize FastAPI application
app = create_app()

# Initialize service layer instances
substitution_resolver = build_resolver()
explanation_generator = ExplanationGenerator()
recipe_ranker = RecipeRanker(
    quick_max_minutes=settings.QUICK_RECIPE_MAX_MINUTES,
    high_threshold=settings.HIGH_MATCH_THRESHOLD,
)


def _bad_request(e: ValueError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@app.get("/")
async def root():
    """
    Root endpoint for service discovery.

    Returns:
        dict: API status and version information
    """
    return {
        "message": "CookMind Ingredient Match & Substitution API",
        "version": API_VERSION,
        "status": "running"
    }


@app.get("/health")
async def health():
    """
    Health check endpoint.

    Returns:
        dict: Service status and substitution table details
    """
    return {
        "status": "healthy",
        "substitution_table": substitution_resolver.table.source,
        "substitution_entries": len(substitution_resolver.table),
    }


@app.post("/match", response_model=MatchResponse)
async def match_recipe(request: MatchRequest) -> MatchResponse:
    """
    Score a recipe against the user's inventory.

    Also suggests substitutes for the first missing ingredients
    (MAX_SUGGESTED_MISSING, two by default) and reports missing ingredients
    that a basic inventory item in stock covers.

    Args:
        request: MatchRequest with recipe ingredients and inventory

    Returns:
        MatchResponse: Score, level, matched/missing ingredients and suggestions

    Raises:
        HTTPException: 400 if an ingredient name is invalid
    """
    try:
        validate_ingredient_list(request.recipe_ingredients)
        validate_ingredient_list(request.inventory)
    except ValueError as e:
        raise _bad_request(e)

    result = analyze_match(
        request.recipe_ingredients,
        request.inventory,
        high_threshold=settings.HIGH_MATCH_THRESHOLD,
    )

    suggestions: List[SubstitutionResult] = [
        substitution_resolver.lookup(ingredient)
        for ingredient in result.missing[:settings.MAX_SUGGESTED_MISSING]
    ]

    logger.info(
        f"Match: {result.score}% ({len(result.missing)} missing, "
        f"{len(suggestions)} suggestion lookup(s))"
    )
    return MatchResponse(
        **result.model_dump(),
        suggestions=suggestions,
        basic_variants=find_covered_variants(result.missing, request.inventory),
    )


@app.post("/substitutions", response_model=SubstitutionResponse)
async def get_substitutions(request: SubstitutionRequest) -> SubstitutionResponse:
    """
    Suggest substitutes for a missing ingredient.

    When an inventory is given, only substitutes the user has are returned.

    Args:
        request: SubstitutionRequest with the ingredient and optional inventory

    Returns:
        SubstitutionResponse: Substitutes, found flag and display options

    Raises:
        HTTPException: 400 if an ingredient name is invalid
    """
    try:
        validate_ingredient_name(request.ingredient)
        if request.inventory is not None:
            validate_ingredient_list(request.inventory)
    except ValueError as e:
        raise _bad_request(e)

    if request.inventory is None:
        result = substitution_resolver.lookup(request.ingredient)
    else:
        available = substitution_resolver.suggest_from_inventory(
            request.ingredient, request.inventory
        )
        result = SubstitutionResult(
            ingredient=request.ingredient,
            substitutes=available,
            found=bool(available),
        )

    return SubstitutionResponse(
        **result.model_dump(),
        options=result.display_options(substitution_resolver.fallback),
    )


@app.post("/explanation", response_model=ExplanationResponse)
async def get_explanation(request: ExplanationRequest) -> ExplanationResponse:
    """
    Explain a substitution.

    Args:
        request: ExplanationRequest with original and substitute

    Returns:
        ExplanationResponse: Explanation text and the values it states
    """
    return ExplanationResponse(
        original=request.original,
        substitute=request.substitute,
        explanation=explanation_generator.generate_explanation(
            request.original, request.substitute
        ),
        confidence=explanation_generator.confidence,
        time_adjustment_minutes=explanation_generator.time_adjustment_minutes,
    )


@app.post("/recipes/rank", response_model=List[RankedRecipe])
async def rank_recipes(request: RankRecipesRequest) -> List[RankedRecipe]:
    """
    Rank recipes by how well they match the user's inventory.

    Args:
        request: Recipes, inventory, optional filters and favorite ids

    Returns:
        List[RankedRecipe]: Filtered recipes, best match first

    Raises:
        HTTPException: 400 if an inventory entry is invalid
    """
    try:
        validate_ingredient_list(request.inventory)
    except ValueError as e:
        raise _bad_request(e)

    return recipe_ranker.rank_recipes(
        request.recipes,
        request.inventory,
        filters=request.filters,
        favorite_ids=request.favorite_ids,
    )


@app.post("/recipes/adapt", response_model=Recipe)
async def apply_recipe_substitutions(request: AdaptRecipeRequest) -> Recipe:
    """
    Apply accepted substitutions to a recipe.

    Args:
        request: Recipe and the substitutions to apply

    Returns:
        Recipe: Copy with rewritten steps and renamed ingredients
    """
    return adapt_recipe(request.recipe, request.substitutions)


@app.post("/timers/parse", response_model=ParseTimerResponse)
async def parse_timer(request: ParseTimerRequest) -> ParseTimerResponse:
    """
    Extract a cooking timer from a preparation step.

    Args:
        request: ParseTimerRequest with the step text

    Returns:
        ParseTimerResponse: Timer and formatted display, or no timer
    """
    timer = parse_step_timer(request.step)
    return ParseTimerResponse(
        step=request.step,
        timer=timer,
        display=format_timer(timer.seconds) if timer else None,
    )


@app.get("/inventory/basic", response_model=List[BasicInventoryItem])
async def get_basic_inventory() -> List[BasicInventoryItem]:
    """
    List the pantry staples seeded into a new inventory.

    Returns:
        List[BasicInventoryItem]: Basic items in display order
    """
    return basic_inventory_items()


@app.post("/inventory/variant-check", response_model=VariantCheckResult)
async def variant_check(request: VariantCheckRequest) -> VariantCheckResult:
    """
    Check whether a recipe ingredient is a variant of a basic item in stock.

    Args:
        request: VariantCheckRequest with the ingredient and inventory

    Returns:
        VariantCheckResult: Variant flag with the covering basic item

    Raises:
        HTTPException: 400 if an ingredient name is invalid
    """
    try:
        validate_ingredient_name(request.ingredient)
        validate_ingredient_list(request.inventory)
    except ValueError as e:
        raise _bad_request(e)

    return check_variant(request.ingredient, request.inventory)


@app.post("/products/tag", response_model=ProductTagResponse)
async def tag_product(request: ProductTagRequest) -> ProductTagResponse:
    """
    Suggest a standard ingredient tag for a supermarket product.

    Args:
        request: ProductTagRequest with the product name and categories

    Returns:
        ProductTagResponse: Suggested tag, or null when nothing fits

    Raises:
        HTTPException: 400 if the product name is invalid
    """
    try:
        validate_ingredient_name(request.product_name, field="Product name")
    except ValueError as e:
        raise _bad_request(e)

    return ProductTagResponse(
        product_name=request.product_name,
        tag=suggest_ingredient_tag(request.product_name, request.categories),
    )
