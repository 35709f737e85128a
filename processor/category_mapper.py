"""Semantic category mapper -- fallback for niches the catalog does not know.

Scores a free-text niche against broad per-category keyword/concept
patterns instead of the granular catalog terms. Used by the classifier only
after exact, partial and fuzzy matching have all failed.

Scoring:
  query tokens (>= 3 chars, stopwords removed) are compared with each
  category's pattern keywords and concept words:
    exact token hit      -> 1.0
    shared stem (>= 4)   -> 0.5
    whole pattern phrase -> 1.0 for each of its tokens
  category score = mean token score. Confidence is capped at 0.95, and
  scores under 0.1 fall back to the general category.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from processor.niche_catalog import normalize_term
from processor.rate_table import CATEGORY_RATES, DEFAULT_CATEGORY_ID, CategoryRate

MAX_CONFIDENCE = 0.95
MIN_SCORE = 0.1

_STOPWORDS = {
    "and", "the", "for", "with", "how", "about", "from", "into", "your", "you",
    "videos", "video", "channel", "content", "best", "top", "new",
}

GENERAL_SUGGESTIONS = [
    "programming", "cooking", "fitness", "gaming", "travel",
    "business", "art", "music", "finance", "education",
]

CATEGORY_PATTERNS: dict[str, dict[str, list[str]]] = {
    "tech": {
        "keywords": [
            "programming", "code", "coding", "developer", "software", "app", "website", "algorithm",
            "framework", "library", "database", "api", "backend", "frontend", "fullstack", "devops",
            "javascript", "python", "java", "react", "vue", "angular", "node", "typescript",
            "html", "css", "sql", "php", "ruby", "rust", "swift", "kotlin",
            "computer", "technology", "digital", "innovation", "saas", "platform",
            "cloud", "server", "hosting", "deployment", "github", "gitlab", "stackoverflow",
        ],
        "concepts": [
            "development", "engineering", "technical", "digital solutions", "automation",
            "artificial intelligence", "machine learning", "data science", "cybersecurity",
        ],
    },
    "finance": {
        "keywords": [
            "money", "investment", "investing", "stock", "crypto", "bitcoin", "ethereum",
            "trading", "portfolio", "dividend", "savings", "budget", "debt", "credit",
            "mortgage", "loan", "bank", "financial", "wealth", "rich", "millionaire",
            "retirement", "pension", "insurance", "tax", "ira", "401k", "roth",
            "real estate", "property", "rental", "landlord", "flip", "roi", "yield",
            "economics", "market", "economy", "recession", "inflation", "currency",
        ],
        "concepts": [
            "personal finance", "wealth building", "passive income", "financial freedom",
            "monetary policy", "economic analysis", "investment strategy",
        ],
    },
    "gaming": {
        "keywords": [
            "game", "gaming", "gamer", "play", "playing", "xbox", "playstation", "nintendo",
            "pc gaming", "mobile gaming", "esports", "twitch", "stream", "streaming",
            "minecraft", "fortnite", "roblox", "valorant", "league", "dota", "csgo",
            "fps", "rpg", "mmorpg", "battle royale", "multiplayer", "single player",
            "indie game", "aaa game", "retro gaming", "speedrun", "walkthrough",
            "trailer", "gameplay",
        ],
        "concepts": [
            "video games", "interactive entertainment", "digital entertainment",
            "competitive gaming", "game development", "game design",
        ],
    },
    "health": {
        "keywords": [
            "health", "medical", "doctor", "medicine", "healthcare", "wellness", "fitness",
            "exercise", "workout", "gym", "nutrition", "diet", "healthy",
            "weight loss", "muscle", "cardio", "yoga", "meditation",
            "mental health", "therapy", "psychology", "anxiety", "depression", "stress",
            "supplement", "vitamin", "protein", "keto", "paleo", "intermittent fasting",
            "sleep", "recovery", "injury", "physical therapy", "rehabilitation",
        ],
        "concepts": [
            "physical wellness", "mental wellness", "holistic health", "preventive care",
            "lifestyle medicine", "health optimization", "body transformation",
        ],
    },
    "education": {
        "keywords": [
            "education", "learning", "study", "student", "teacher", "school", "university",
            "college", "course", "lesson", "tutorial", "how to", "explain",
            "math", "history", "language", "english", "spanish", "french",
            "literature", "philosophy",
            "skill", "certification", "degree", "diploma", "academic",
            "thesis", "knowledge",
        ],
        "concepts": [
            "knowledge transfer", "skill development", "academic content", "professional development",
            "continuing education", "lifelong learning", "educational technology",
        ],
    },
    "business": {
        "keywords": [
            "business", "entrepreneur", "startup", "company", "corporate", "marketing",
            "sales", "revenue", "profit", "growth", "scale", "strategy", "management",
            "leadership", "employee", "hiring", "recruitment",
            "brand", "branding", "advertising", "promotion", "seo", "social media",
            "ecommerce", "dropshipping", "amazon", "shopify", "etsy", "ebay",
            "franchise", "partnership", "acquisition", "merger", "ipo", "venture capital",
        ],
        "concepts": [
            "entrepreneurship", "business development", "digital marketing", "e-commerce",
            "business strategy", "corporate culture", "business operations",
        ],
    },
    "creative": {
        "keywords": [
            "art", "artist", "creative", "design", "designer", "graphic", "visual",
            "photography", "photo", "camera", "photoshop", "lightroom", "editing",
            "music", "musician", "song", "singing", "instrument", "guitar", "piano",
            "production", "recording", "studio", "mixing", "mastering", "beat",
            "drawing", "painting", "illustration", "digital art", "traditional art",
            "crafts", "sculpture", "knitting", "woodworking",
        ],
        "concepts": [
            "artistic expression", "visual arts", "performing arts", "creative content",
            "artistic skills", "creative process", "aesthetic design",
        ],
    },
    "lifestyle": {
        "keywords": [
            "lifestyle", "life", "daily", "routine", "personal", "family", "relationship",
            "dating", "marriage", "parenting", "kids", "children", "baby", "pregnancy",
            "home", "house", "decor", "interior", "cleaning", "organization",
            "self care", "mindfulness", "motivation", "inspiration", "personal development",
            "productivity", "habits", "goals", "success", "happiness", "gratitude",
            "fashion", "style", "makeup", "beauty", "aesthetic", "trendy",
        ],
        "concepts": [
            "personal lifestyle", "life optimization", "work-life balance", "personal growth",
            "lifestyle design", "quality of life", "life philosophy",
        ],
    },
    "entertainment": {
        "keywords": [
            "entertainment", "movie", "film", "tv", "television", "show", "series",
            "netflix", "disney", "marvel", "superhero", "actor", "actress",
            "celebrity", "hollywood", "comedy", "funny", "humor", "joke", "meme",
            "reaction", "review", "critique", "drama", "romance",
            "thriller", "horror", "documentary", "animation", "cartoon", "anime",
        ],
        "concepts": [
            "popular culture", "mass entertainment", "media content", "pop culture",
            "entertainment industry", "cultural commentary", "entertainment news",
        ],
    },
    "food": {
        "keywords": [
            "food", "cooking", "recipe", "kitchen", "chef", "culinary", "baking",
            "restaurant", "dining", "meal", "breakfast", "lunch", "dinner", "snack",
            "ingredient", "spice", "flavor", "taste", "delicious",
            "bread", "cake", "cookie", "dessert", "pizza", "pasta", "soup",
            "vegetarian", "vegan", "gluten free", "organic", "bbq", "grilling",
        ],
        "concepts": [
            "culinary arts", "food preparation", "gastronomy", "food culture",
            "culinary techniques", "food science",
        ],
    },
    "travel": {
        "keywords": [
            "travel", "trip", "vacation", "holiday", "destination", "tourism",
            "backpacking", "adventure", "explore", "journey", "wanderlust",
            "flight", "hotel", "accommodation", "booking", "itinerary",
            "city", "country", "culture", "local",
            "beach", "mountain", "forest", "desert", "island", "cruise", "camping", "hiking",
        ],
        "concepts": [
            "travel experiences", "cultural exploration", "adventure travel",
            "travel planning", "destination guides", "travel lifestyle",
        ],
    },
    "automotive": {
        "keywords": [
            "car", "auto", "vehicle", "automobile", "truck", "suv", "motorcycle",
            "engine", "motor", "driving", "race", "racing",
            "repair", "maintenance", "mechanic", "garage", "dealership",
            "electric", "hybrid", "diesel", "fuel", "mpg",
            "tesla", "bmw", "mercedes", "audi", "toyota", "honda", "ford",
        ],
        "concepts": [
            "automotive industry", "vehicle technology", "transportation",
            "automotive maintenance", "car culture", "automotive reviews",
        ],
    },
    "science": {
        "keywords": [
            "science", "research", "experiment", "laboratory", "discovery",
            "space", "astronomy", "nasa", "rocket", "planet", "star", "galaxy",
            "physics", "chemistry", "biology", "geology", "mathematics", "equation",
            "theory", "hypothesis", "evidence",
            "breakthrough", "invention", "patent", "dinosaur", "fossil",
        ],
        "concepts": [
            "scientific research", "scientific method", "scientific discovery",
            "space exploration", "natural sciences", "applied sciences",
        ],
    },
    "sports": {
        "keywords": [
            "sport", "sports", "athlete", "team", "competition", "championship",
            "football", "soccer", "basketball", "baseball", "tennis", "golf",
            "swimming", "running", "marathon", "olympics", "coach",
            "player", "match", "season", "tournament", "boxing", "mma", "wrestling",
            "hockey", "cricket", "skateboarding", "surfing",
        ],
        "concepts": [
            "athletic performance", "competitive sports", "team sports", "individual sports",
            "sports training", "sports analysis", "sports entertainment",
        ],
    },
}


@dataclass(frozen=True)
class CategorySuggestion:
    category: CategoryRate
    confidence: float
    reasoning: str
    suggestions: list[str] = field(default_factory=list)


@dataclass
class _PatternSet:
    words: frozenset[str]
    stems: tuple[str, ...]
    phrases: tuple[str, ...]
    keywords: tuple[str, ...]


class CategoryMapper:
    """Keyword/concept-pattern category suggester."""

    def __init__(self, patterns: dict[str, dict[str, list[str]]] | None = None,
                 rates: dict[str, CategoryRate] | None = None):
        self._rates = rates if rates is not None else CATEGORY_RATES
        self._patterns: dict[str, _PatternSet] = {}
        for category_id, pattern in (patterns or CATEGORY_PATTERNS).items():
            if category_id not in self._rates or category_id == DEFAULT_CATEGORY_ID:
                continue
            keywords = [normalize_term(k) for k in pattern.get("keywords", [])]
            concepts = [normalize_term(c) for c in pattern.get("concepts", [])]
            words = {k for k in keywords if " " not in k}
            words.update(w for c in concepts for w in c.split() if len(w) > 3)
            self._patterns[category_id] = _PatternSet(
                words=frozenset(words),
                stems=tuple(w for w in words if len(w) >= 4),
                phrases=tuple(p for p in keywords + concepts if " " in p),
                keywords=tuple(keywords),
            )

    @staticmethod
    def _tokens(normalized: str) -> list[str]:
        return [t for t in normalized.split() if len(t) >= 3 and t not in _STOPWORDS]

    def _score(self, normalized: str, tokens: list[str], pattern: _PatternSet) -> tuple[float, list[str]]:
        if not tokens:
            return 0.0, []

        matched: list[str] = []
        token_scores: dict[str, float] = {}
        for token in tokens:
            if token in pattern.words:
                token_scores[token] = 1.0
                matched.append(token)
            elif len(token) >= 4 and any(
                token.startswith(stem) or stem.startswith(token) for stem in pattern.stems
            ):
                token_scores[token] = 0.5
                matched.append(token)

        # 패턴 구문이 통째로 들어 있으면 구성 토큰 전부 만점
        padded = f" {normalized} "
        for phrase in pattern.phrases:
            if f" {phrase} " in padded:
                for word in phrase.split():
                    if word in tokens:
                        token_scores[word] = 1.0
                matched.insert(0, phrase)

        score = sum(token_scores.get(t, 0.0) for t in tokens) / len(tokens)
        return min(score, 1.0), matched

    def suggest_category(self, query: str) -> CategorySuggestion:
        """Best category for an unknown niche, or general with confidence 0."""
        general = self._rates[DEFAULT_CATEGORY_ID]
        normalized = normalize_term(query)
        if not normalized:
            return CategorySuggestion(general, 0.0, "No search term provided", [])

        tokens = self._tokens(normalized)
        best_id: str | None = None
        best_score = 0.0
        best_matched: list[str] = []
        for category_id, pattern in self._patterns.items():
            score, matched = self._score(normalized, tokens, pattern)
            if score > best_score:
                best_id, best_score, best_matched = category_id, score, matched

        if best_id is None or best_score < MIN_SCORE:
            return CategorySuggestion(
                general,
                0.0,
                f'No strong match found for "{query}". Using general category.',
                list(GENERAL_SUGGESTIONS),
            )

        category = self._rates[best_id]
        if best_matched:
            keyword_list = " and ".join(f'"{k}"' for k in best_matched[:2])
            reasoning = f'"{query}" matches {category.display_name} keywords including {keyword_list}.'
        else:
            reasoning = f'"{query}" appears to be related to {category.display_name} based on semantic analysis.'

        return CategorySuggestion(
            category=category,
            confidence=round(min(best_score, MAX_CONFIDENCE), 4),
            reasoning=reasoning,
            suggestions=list(self._patterns[best_id].keywords[:5]),
        )

    def category_suggestions(self, partial: str, limit: int = 3) -> list[CategorySuggestion]:
        """Categories whose pattern keywords overlap a partial term."""
        normalized = normalize_term(partial)
        if len(normalized) < 2:
            return []

        tokens = self._tokens(normalized) or [normalized]
        results: list[CategorySuggestion] = []
        for category_id, pattern in self._patterns.items():
            relevant = [k for k in pattern.keywords if normalized in k or k in normalized][:3]
            if not relevant:
                continue
            score, _ = self._score(normalized, tokens, pattern)
            results.append(
                CategorySuggestion(
                    category=self._rates[category_id],
                    confidence=round(min(score, MAX_CONFIDENCE), 4),
                    reasoning=f"Related keywords: {', '.join(relevant)}",
                    suggestions=relevant,
                )
            )

        results.sort(key=lambda s: s.confidence, reverse=True)
        return results[:limit]
