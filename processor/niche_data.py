"""Niche catalog seed data.

Granular niches mapped to one parent category each. Declaration order is the
tie-break order for exact/partial/fuzzy matching, so new entries go at the end
of their section rather than being sorted.
"""

NICHE_ROWS: list[dict] = [
    # ── TECHNOLOGY & SOFTWARE ──
    {
        "id": "web-development",
        "name": "Web Development",
        "category": "tech",
        "rpm": 12.0,
        "description": "HTML, CSS, JavaScript, React, Vue, Angular",
        "keywords": ["javascript", "react", "vue", "angular", "html", "css", "typescript", "nodejs", "web development", "frontend", "backend", "fullstack"],
        "aliases": ["js", "reactjs", "vuejs", "web dev", "frontend dev", "backend dev"],
    },
    {
        "id": "mobile-development",
        "name": "Mobile Development",
        "category": "tech",
        "rpm": 12.0,
        "description": "iOS, Android, React Native, Flutter",
        "keywords": ["ios", "android", "swift", "kotlin", "react native", "flutter", "mobile app", "app development", "xamarin"],
        "aliases": ["mobile dev", "app dev", "ios dev", "android dev"],
    },
    {
        "id": "data-science",
        "name": "Data Science & AI",
        "category": "tech",
        "rpm": 12.0,
        "description": "Python, machine learning, AI, data analysis",
        "keywords": ["python", "machine learning", "artificial intelligence", "data science", "pandas", "tensorflow", "pytorch", "jupyter", "kaggle", "ai"],
        "aliases": ["ml", "data analysis", "deep learning", "neural networks"],
    },
    {
        "id": "cybersecurity",
        "name": "Cybersecurity",
        "category": "tech",
        "rpm": 12.0,
        "description": "Security, hacking, penetration testing",
        "keywords": ["cybersecurity", "hacking", "penetration testing", "security", "ethical hacking", "kali linux", "networking", "malware"],
        "aliases": ["infosec", "cyber security", "pen testing", "white hat"],
    },
    {
        "id": "cloud-computing",
        "name": "Cloud Computing",
        "category": "tech",
        "rpm": 12.0,
        "description": "AWS, Azure, Google Cloud, DevOps",
        "keywords": ["aws", "azure", "google cloud", "cloud computing", "devops", "kubernetes", "docker", "serverless"],
        "aliases": ["gcp", "amazon web services", "microsoft azure"],
    },

    # ── GAMING & ESPORTS ──
    {
        "id": "minecraft",
        "name": "Minecraft",
        "category": "gaming",
        "rpm": 4.0,
        "description": "Minecraft gameplay, tutorials, builds",
        "keywords": ["minecraft", "creeper", "redstone", "building", "survival", "creative mode", "nether", "ender dragon"],
        "aliases": ["mc", "craft"],
    },
    {
        "id": "roblox",
        "name": "Roblox",
        "category": "gaming",
        "rpm": 4.0,
        "description": "Roblox games, scripting, development",
        "keywords": ["roblox", "robux", "lua scripting", "roblox studio", "obby", "tycoon"],
        "aliases": ["rblx"],
    },
    {
        "id": "fortnite",
        "name": "Fortnite",
        "category": "gaming",
        "rpm": 4.0,
        "description": "Fortnite gameplay, tips, tricks",
        "keywords": ["fortnite", "battle royale", "epic games", "building", "victory royale", "skins"],
        "aliases": ["fn"],
    },
    {
        "id": "fps-games",
        "name": "FPS Games",
        "category": "gaming",
        "rpm": 4.0,
        "description": "First-person shooters, tactics, gameplay",
        "keywords": ["call of duty", "valorant", "counter strike", "apex legends", "fps", "shooting games", "cod", "csgo"],
        "aliases": ["first person shooter", "shooter games"],
    },
    {
        "id": "retro-gaming",
        "name": "Retro Gaming",
        "category": "gaming",
        "rpm": 4.0,
        "description": "Classic games, nostalgia, vintage consoles",
        "keywords": ["retro gaming", "nintendo", "sega", "atari", "classic games", "vintage", "arcade"],
        "aliases": ["old games", "classic gaming", "vintage gaming"],
    },

    # ── FINANCE & INVESTMENT ──
    {
        "id": "cryptocurrency",
        "name": "Cryptocurrency",
        "category": "finance",
        "rpm": 15.0,
        "description": "Bitcoin, Ethereum, trading, blockchain",
        "keywords": ["bitcoin", "ethereum", "cryptocurrency", "crypto", "blockchain", "defi", "nft", "trading", "altcoins"],
        "aliases": ["btc", "eth", "crypto trading", "digital currency"],
    },
    {
        "id": "stock-market",
        "name": "Stock Market",
        "category": "finance",
        "rpm": 15.0,
        "description": "Stock trading, investing, market analysis",
        "keywords": ["stocks", "stock market", "investing", "trading", "nasdaq", "sp500", "dow jones", "portfolio"],
        "aliases": ["stock trading", "equity trading", "shares"],
    },
    {
        "id": "real-estate",
        "name": "Real Estate",
        "category": "finance",
        "rpm": 15.0,
        "description": "Property investment, real estate tips",
        "keywords": ["real estate", "property", "investment property", "rental", "house flipping", "mortgage", "landlord"],
        "aliases": ["property investment", "real estate investing"],
    },
    {
        "id": "personal-finance",
        "name": "Personal Finance",
        "category": "finance",
        "rpm": 15.0,
        "description": "Budgeting, saving, debt management",
        "keywords": ["budgeting", "saving money", "debt", "credit score", "financial planning", "retirement", "emergency fund"],
        "aliases": ["money management", "financial advice"],
    },

    # ── HEALTH & WELLNESS ──
    {
        "id": "fitness",
        "name": "Fitness & Exercise",
        "category": "health",
        "rpm": 8.0,
        "description": "Workouts, exercise routines, fitness tips",
        "keywords": ["fitness", "workout", "exercise", "gym", "bodybuilding", "weightlifting", "cardio", "strength training"],
        "aliases": ["training", "working out", "fitness training"],
    },
    {
        "id": "nutrition",
        "name": "Nutrition & Diet",
        "category": "health",
        "rpm": 8.0,
        "description": "Diet, nutrition, healthy eating",
        "keywords": ["nutrition", "diet", "healthy eating", "weight loss", "keto", "vegan", "protein", "vitamins"],
        "aliases": ["healthy diet", "eating healthy", "meal planning"],
    },
    {
        "id": "mental-health",
        "name": "Mental Health",
        "category": "health",
        "rpm": 8.0,
        "description": "Mental wellness, psychology, therapy",
        "keywords": ["mental health", "psychology", "therapy", "anxiety", "depression", "mindfulness", "meditation"],
        "aliases": ["mental wellness", "psychological health"],
    },

    # ── EDUCATION & LEARNING ──
    {
        "id": "math",
        "name": "Mathematics",
        "category": "education",
        "rpm": 10.0,
        "description": "Math tutorials, problem solving",
        "keywords": ["mathematics", "math", "algebra", "calculus", "geometry", "statistics", "trigonometry"],
        "aliases": ["maths", "mathematical"],
    },
    {
        "id": "science-education",
        "name": "Science Education",
        "category": "education",
        "rpm": 10.0,
        "description": "Physics, chemistry, biology tutorials",
        "keywords": ["physics", "chemistry", "biology", "science", "experiments", "laboratory", "research"],
        "aliases": ["scientific education", "science learning"],
    },
    {
        "id": "language-learning",
        "name": "Language Learning",
        "category": "education",
        "rpm": 10.0,
        "description": "Foreign languages, linguistics",
        "keywords": ["spanish", "french", "german", "japanese", "chinese", "language learning", "linguistics", "grammar"],
        "aliases": ["foreign language", "second language"],
    },

    # ── BUSINESS & ENTREPRENEURSHIP ──
    {
        "id": "digital-marketing",
        "name": "Digital Marketing",
        "category": "business",
        "rpm": 10.0,
        "description": "SEO, social media, online marketing",
        "keywords": ["digital marketing", "seo", "social media marketing", "google ads", "facebook ads", "content marketing"],
        "aliases": ["online marketing", "internet marketing"],
    },
    {
        "id": "ecommerce",
        "name": "E-commerce",
        "category": "business",
        "rpm": 10.0,
        "description": "Online selling, dropshipping, Amazon FBA",
        "keywords": ["ecommerce", "dropshipping", "amazon fba", "shopify", "online store", "selling online"],
        "aliases": ["e-commerce", "online business", "internet business"],
    },
    {
        "id": "startup",
        "name": "Startups",
        "category": "business",
        "rpm": 10.0,
        "description": "Entrepreneurship, startup advice, funding",
        "keywords": ["startup", "entrepreneur", "business plan", "venture capital", "funding", "pitch deck"],
        "aliases": ["entrepreneurship", "business startup"],
    },

    # ── CREATIVE & ARTS ──
    {
        "id": "photography",
        "name": "Photography",
        "category": "creative",
        "rpm": 4.5,
        "description": "Camera techniques, photo editing, composition",
        "keywords": ["photography", "camera", "lightroom", "photoshop", "portrait", "landscape", "editing"],
        "aliases": ["photo", "photographer", "picture taking"],
    },
    {
        "id": "graphic-design",
        "name": "Graphic Design",
        "category": "creative",
        "rpm": 4.5,
        "description": "Design software, logos, branding",
        "keywords": ["graphic design", "photoshop", "illustrator", "logo design", "branding", "typography"],
        "aliases": ["design", "visual design", "graphics"],
    },
    {
        "id": "music-production",
        "name": "Music Production",
        "category": "creative",
        "rpm": 4.5,
        "description": "Music creation, audio engineering, DAWs",
        "keywords": ["music production", "audio engineering", "mixing", "mastering", "fl studio", "ableton", "pro tools"],
        "aliases": ["music making", "audio production", "beat making"],
    },

    # ── FOOD & COOKING ──
    {
        "id": "cooking",
        "name": "Cooking & Recipes",
        "category": "food",
        "rpm": 6.0,
        "description": "Recipes, cooking techniques, kitchen tips",
        "keywords": ["cooking", "recipe", "baking", "kitchen", "chef", "culinary", "food preparation"],
        "aliases": ["recipes", "cooking tips", "food"],
    },
    {
        "id": "baking",
        "name": "Baking & Pastry",
        "category": "food",
        "rpm": 6.0,
        "description": "Bread, cakes, pastries, desserts",
        "keywords": ["baking", "bread", "cake", "pastry", "dessert", "cookies", "sourdough"],
        "aliases": ["bakery", "pastries", "desserts"],
    },

    # ── LIFESTYLE & PERSONAL ──
    {
        "id": "beauty",
        "name": "Beauty & Cosmetics",
        "category": "lifestyle",
        "rpm": 5.0,
        "description": "Makeup, skincare, beauty tutorials",
        "keywords": ["makeup", "beauty", "skincare", "cosmetics", "foundation", "lipstick", "eyeshadow"],
        "aliases": ["beauty tips", "makeup tutorial", "cosmetic"],
    },
    {
        "id": "fashion",
        "name": "Fashion & Style",
        "category": "lifestyle",
        "rpm": 5.0,
        "description": "Clothing, style, fashion trends",
        "keywords": ["fashion", "style", "clothing", "outfit", "trend", "designer", "wardrobe"],
        "aliases": ["fashion tips", "style guide", "clothing"],
    },
    {
        "id": "parenting",
        "name": "Parenting & Family",
        "category": "lifestyle",
        "rpm": 5.0,
        "description": "Child care, family life, parenting tips",
        "keywords": ["parenting", "kids", "children", "family", "baby", "toddler", "pregnancy"],
        "aliases": ["child care", "family life", "raising kids"],
    },

    # ── TRAVEL & ADVENTURE ──
    {
        "id": "travel-vlog",
        "name": "Travel Vlogs",
        "category": "travel",
        "rpm": 7.0,
        "description": "Travel experiences, destinations, culture",
        "keywords": ["travel", "vacation", "destination", "tourism", "backpacking", "adventure", "culture"],
        "aliases": ["traveling", "trip", "journey"],
    },

    # ── AUTOMOTIVE ──
    {
        "id": "car-reviews",
        "name": "Car Reviews",
        "category": "automotive",
        "rpm": 6.5,
        "description": "Vehicle reviews, car comparisons",
        "keywords": ["car", "vehicle", "automobile", "car review", "driving", "automotive", "truck", "suv"],
        "aliases": ["auto", "cars", "vehicles"],
    },

    # ── ENTERTAINMENT ──
    {
        "id": "movies-tv",
        "name": "Movies & TV",
        "category": "entertainment",
        "rpm": 3.5,
        "description": "Movie reviews, TV shows, entertainment news",
        "keywords": ["movie", "film", "tv show", "television", "netflix", "cinema", "actor", "actress"],
        "aliases": ["movies", "films", "tv shows"],
    },
    {
        "id": "comedy",
        "name": "Comedy & Humor",
        "category": "entertainment",
        "rpm": 3.5,
        "description": "Comedy skits, humor, funny content",
        "keywords": ["comedy", "funny", "humor", "joke", "skit", "stand up", "meme"],
        "aliases": ["funny videos", "jokes", "humor"],
    },

    # ── SCIENCE & RESEARCH ──
    {
        "id": "space",
        "name": "Space & Astronomy",
        "category": "science",
        "rpm": 9.0,
        "description": "Space exploration, astronomy, universe",
        "keywords": ["space", "astronomy", "nasa", "planet", "star", "galaxy", "universe", "spacex"],
        "aliases": ["outer space", "cosmos", "celestial"],
    },

    # ── SPORTS & FITNESS ──
    {
        "id": "football",
        "name": "Football/Soccer",
        "category": "sports",
        "rpm": 5.0,
        "description": "Football/soccer content, matches, players",
        "keywords": ["football", "soccer", "fifa", "world cup", "premier league", "champions league"],
        "aliases": ["soccer", "football match"],
    },
    {
        "id": "basketball",
        "name": "Basketball",
        "category": "sports",
        "rpm": 5.0,
        "description": "Basketball content, NBA, gameplay",
        "keywords": ["basketball", "nba", "lebron james", "michael jordan", "dunk", "three pointer"],
        "aliases": ["nba", "basketball game"],
    },

    # ── HIGH-RPM BUSINESS & FINANCE NICHES ──
    {
        "id": "dropshipping",
        "name": "Dropshipping",
        "category": "business",
        "rpm": 18.0,
        "description": "Dropshipping business, e-commerce, online selling",
        "keywords": ["dropshipping", "shopify dropshipping", "aliexpress", "oberlo", "spocket", "ecommerce business", "online store"],
        "aliases": ["drop shipping", "online selling", "ecom", "e-commerce"],
    },
    {
        "id": "affiliate-marketing",
        "name": "Affiliate Marketing",
        "category": "business",
        "rpm": 18.0,
        "description": "Affiliate marketing strategies, passive income",
        "keywords": ["affiliate marketing", "clickbank", "commission junction", "amazon associates", "passive income", "affiliate links"],
        "aliases": ["affiliate income", "referral marketing", "commission marketing"],
    },
    {
        "id": "social-media-marketing",
        "name": "Social Media Marketing",
        "category": "business",
        "rpm": 18.0,
        "description": "Instagram marketing, TikTok growth, social media strategy",
        "keywords": ["social media marketing", "instagram marketing", "tiktok marketing", "facebook ads", "social media growth", "influencer marketing"],
        "aliases": ["smm", "instagram growth", "social marketing", "social media strategy"],
    },
    {
        "id": "make-money-online",
        "name": "Make Money Online",
        "category": "business",
        "rpm": 18.0,
        "description": "Online income strategies, side hustles, remote work",
        "keywords": ["make money online", "side hustle", "work from home", "online income", "freelancing", "gig economy"],
        "aliases": ["online money", "side income", "remote income", "internet money"],
    },
    {
        "id": "forex-trading",
        "name": "Forex Trading",
        "category": "finance",
        "rpm": 22.0,
        "description": "Foreign exchange trading, currency markets",
        "keywords": ["forex", "fx trading", "currency trading", "foreign exchange", "forex signals", "metatrader"],
        "aliases": ["fx", "currency market", "forex market", "foreign exchange trading"],
    },
    {
        "id": "day-trading",
        "name": "Day Trading",
        "category": "finance",
        "rpm": 22.0,
        "description": "Day trading strategies, swing trading, options",
        "keywords": ["day trading", "swing trading", "options trading", "scalping", "trading strategies", "stock charts"],
        "aliases": ["active trading", "short term trading", "intraday trading"],
    },
    {
        "id": "credit-repair",
        "name": "Credit Repair",
        "category": "finance",
        "rpm": 22.0,
        "description": "Credit score improvement, debt management",
        "keywords": ["credit repair", "credit score", "fico score", "credit report", "debt consolidation", "credit cards"],
        "aliases": ["credit improvement", "credit restoration", "credit building"],
    },
    {
        "id": "insurance",
        "name": "Insurance",
        "category": "finance",
        "rpm": 22.0,
        "description": "Life insurance, health insurance, auto insurance",
        "keywords": ["life insurance", "health insurance", "auto insurance", "homeowners insurance", "insurance quotes"],
        "aliases": ["insurance coverage", "insurance plans", "insurance advice"],
    },

    # ── POPULAR TECH NICHES ──
    {
        "id": "artificial-intelligence",
        "name": "Artificial Intelligence",
        "category": "tech",
        "rpm": 15.0,
        "description": "AI tools, ChatGPT, machine learning tutorials",
        "keywords": ["artificial intelligence", "chatgpt", "openai", "ai tools", "gpt", "claude", "midjourney", "stable diffusion"],
        "aliases": ["ai", "machine intelligence", "ai technology", "generative ai"],
    },
    {
        "id": "productivity-apps",
        "name": "Productivity Apps",
        "category": "tech",
        "rpm": 15.0,
        "description": "Notion, productivity software, automation tools",
        "keywords": ["notion", "obsidian", "todoist", "productivity apps", "zapier", "automation", "workflow"],
        "aliases": ["productivity tools", "organization apps", "workflow tools"],
    },
    {
        "id": "app-reviews",
        "name": "App Reviews",
        "category": "tech",
        "rpm": 15.0,
        "description": "Mobile app reviews, software comparisons",
        "keywords": ["app review", "software review", "app comparison", "best apps", "mobile apps", "productivity software"],
        "aliases": ["software comparison", "app recommendations", "tech reviews"],
    },
    {
        "id": "wordpress",
        "name": "WordPress",
        "category": "tech",
        "rpm": 15.0,
        "description": "WordPress tutorials, website building, plugins",
        "keywords": ["wordpress", "elementor", "gutenberg", "wp plugins", "website building", "cms"],
        "aliases": ["wp", "wordpress development", "wordpress design"],
    },

    # ── POPULAR HEALTH & FITNESS NICHES ──
    {
        "id": "weight-loss",
        "name": "Weight Loss",
        "category": "health",
        "rpm": 10.0,
        "description": "Weight loss tips, diet plans, transformation",
        "keywords": ["weight loss", "lose weight", "diet plan", "fat loss", "transformation", "slimming", "weight management"],
        "aliases": ["losing weight", "fat burning", "weight reduction", "slim down"],
    },
    {
        "id": "yoga",
        "name": "Yoga",
        "category": "health",
        "rpm": 10.0,
        "description": "Yoga poses, meditation, mindfulness",
        "keywords": ["yoga", "yoga poses", "yoga flow", "vinyasa", "hatha yoga", "yin yoga", "power yoga"],
        "aliases": ["yoga practice", "yoga workout", "yoga routine"],
    },
    {
        "id": "bodybuilding",
        "name": "Bodybuilding",
        "category": "health",
        "rpm": 10.0,
        "description": "Muscle building, strength training, supplements",
        "keywords": ["bodybuilding", "muscle building", "strength training", "powerlifting", "protein", "supplements", "bulking"],
        "aliases": ["muscle gain", "strength building", "mass building"],
    },
    {
        "id": "keto-diet",
        "name": "Keto Diet",
        "category": "health",
        "rpm": 10.0,
        "description": "Ketogenic diet, low carb recipes, keto lifestyle",
        "keywords": ["keto", "ketogenic diet", "low carb", "keto recipes", "ketosis", "keto meal prep"],
        "aliases": ["ketogenic", "low carb diet", "keto lifestyle"],
    },

    # ── POPULAR LIFESTYLE NICHES ──
    {
        "id": "minimalism",
        "name": "Minimalism",
        "category": "lifestyle",
        "rpm": 6.0,
        "description": "Minimalist lifestyle, decluttering, simple living",
        "keywords": ["minimalism", "minimalist", "decluttering", "simple living", "marie kondo", "konmari"],
        "aliases": ["minimal living", "simple life", "declutter"],
    },
    {
        "id": "productivity",
        "name": "Productivity",
        "category": "lifestyle",
        "rpm": 6.0,
        "description": "Productivity tips, time management, habits",
        "keywords": ["productivity", "time management", "habits", "morning routine", "goal setting", "self improvement"],
        "aliases": ["time management", "efficiency", "life optimization"],
    },
    {
        "id": "relationships",
        "name": "Relationships",
        "category": "lifestyle",
        "rpm": 6.0,
        "description": "Dating advice, relationships, love and romance",
        "keywords": ["dating", "relationships", "dating advice", "love", "romance", "dating tips", "relationship goals"],
        "aliases": ["dating tips", "relationship advice", "love advice"],
    },
    {
        "id": "self-improvement",
        "name": "Self Improvement",
        "category": "lifestyle",
        "rpm": 6.0,
        "description": "Personal development, self help, motivation",
        "keywords": ["self improvement", "personal development", "self help", "motivation", "confidence", "success"],
        "aliases": ["personal growth", "self development", "life improvement"],
    },

    # ── POPULAR CREATIVE NICHES ──
    {
        "id": "digital-art",
        "name": "Digital Art",
        "category": "creative",
        "rpm": 5.0,
        "description": "Digital painting, procreate, art tutorials",
        "keywords": ["digital art", "procreate", "digital painting", "ipad art", "photoshop art", "digital drawing"],
        "aliases": ["digital drawing", "digital illustration", "ipad drawing"],
    },
    {
        "id": "video-editing",
        "name": "Video Editing",
        "category": "creative",
        "rpm": 5.0,
        "description": "Video editing tutorials, premiere pro, after effects",
        "keywords": ["video editing", "premiere pro", "after effects", "davinci resolve", "final cut pro", "filmmaking"],
        "aliases": ["video production", "film editing", "video creation"],
    },
    {
        "id": "logo-design",
        "name": "Logo Design",
        "category": "creative",
        "rpm": 5.0,
        "description": "Logo design process, branding, graphic design",
        "keywords": ["logo design", "branding", "brand identity", "graphic design", "illustrator tutorials"],
        "aliases": ["brand design", "identity design", "logo creation"],
    },

    # ── POPULAR GAMING NICHES ──
    {
        "id": "among-us",
        "name": "Among Us",
        "category": "gaming",
        "rpm": 4.0,
        "description": "Among Us gameplay, strategies, funny moments",
        "keywords": ["among us", "impostor", "crewmate", "sus", "emergency meeting"],
        "aliases": ["among us game", "impostor game"],
    },
    {
        "id": "fall-guys",
        "name": "Fall Guys",
        "category": "gaming",
        "rpm": 4.0,
        "description": "Fall Guys gameplay, tips, funny fails",
        "keywords": ["fall guys", "bean guys", "battle royale", "party game"],
        "aliases": ["fall guys ultimate knockout", "bean game"],
    },
    {
        "id": "genshin-impact",
        "name": "Genshin Impact",
        "category": "gaming",
        "rpm": 4.0,
        "description": "Genshin Impact guides, character builds, gacha",
        "keywords": ["genshin impact", "gacha", "primogems", "mihoyo", "character builds", "artifacts"],
        "aliases": ["genshin", "gi"],
    },
    {
        "id": "pokemon",
        "name": "Pokemon",
        "category": "gaming",
        "rpm": 4.0,
        "description": "Pokemon games, cards, theories, nostalgia",
        "keywords": ["pokemon", "pikachu", "nintendo", "pokemon go", "pokemon cards", "gamefreak"],
        "aliases": ["pokémon", "pocket monsters"],
    },

    # ── POPULAR FOOD NICHES ──
    {
        "id": "meal-prep",
        "name": "Meal Prep",
        "category": "food",
        "rpm": 3.0,
        "description": "Meal preparation, healthy meal prep, food planning",
        "keywords": ["meal prep", "meal planning", "food prep", "healthy meal prep", "weekly meal prep"],
        "aliases": ["food preparation", "meal planning", "prep cooking"],
    },
    {
        "id": "vegan-cooking",
        "name": "Vegan Cooking",
        "category": "food",
        "rpm": 3.0,
        "description": "Vegan recipes, plant-based cooking, vegan lifestyle",
        "keywords": ["vegan", "plant based", "vegan recipes", "vegan cooking", "plant based diet"],
        "aliases": ["plant based cooking", "vegan food", "plant based recipes"],
    },
    {
        "id": "desserts",
        "name": "Desserts",
        "category": "food",
        "rpm": 3.0,
        "description": "Dessert recipes, cake decorating, sweet treats",
        "keywords": ["desserts", "cake", "cupcakes", "cookies", "sweet treats", "cake decorating"],
        "aliases": ["sweets", "sweet recipes", "dessert making"],
    },

    # ── POPULAR TRAVEL NICHES ──
    {
        "id": "budget-travel",
        "name": "Budget Travel",
        "category": "travel",
        "rpm": 7.0,
        "description": "Budget travel tips, cheap flights, backpacking",
        "keywords": ["budget travel", "cheap travel", "backpacking", "travel hacks", "cheap flights"],
        "aliases": ["affordable travel", "low cost travel", "travel deals"],
    },
    {
        "id": "solo-travel",
        "name": "Solo Travel",
        "category": "travel",
        "rpm": 7.0,
        "description": "Solo travel guides, safety tips, solo adventures",
        "keywords": ["solo travel", "traveling alone", "solo female travel", "solo trip", "independent travel"],
        "aliases": ["solo adventure", "traveling solo", "independent travel"],
    },
    {
        "id": "van-life",
        "name": "Van Life",
        "category": "travel",
        "rpm": 7.0,
        "description": "Van life adventures, RV living, nomadic lifestyle",
        "keywords": ["van life", "rv life", "nomad life", "van conversion", "mobile living", "tiny house on wheels"],
        "aliases": ["vanlife", "rv living", "nomadic life"],
    },

    # ── POPULAR ENTERTAINMENT NICHES ──
    {
        "id": "movie-reviews",
        "name": "Movie Reviews",
        "category": "entertainment",
        "rpm": 3.5,
        "description": "Movie reviews, film analysis, cinema critique",
        "keywords": ["movie review", "film review", "cinema", "movie analysis", "film critique"],
        "aliases": ["film reviews", "movie criticism", "cinema reviews"],
    },
    {
        "id": "celebrity-news",
        "name": "Celebrity News",
        "category": "entertainment",
        "rpm": 3.5,
        "description": "Celebrity gossip, entertainment news, pop culture",
        "keywords": ["celebrity", "celebrity news", "hollywood", "entertainment news", "pop culture", "gossip"],
        "aliases": ["celebrity gossip", "entertainment gossip", "star news"],
    },
    {
        "id": "reaction-videos",
        "name": "Reaction Videos",
        "category": "entertainment",
        "rpm": 3.5,
        "description": "Reaction content, first time watching, commentary",
        "keywords": ["reaction", "react", "first time watching", "reaction video", "commentary"],
        "aliases": ["reactions", "react video", "response video"],
    },

    # ── POPULAR EDUCATIONAL NICHES ──
    {
        "id": "history",
        "name": "History",
        "category": "education",
        "rpm": 12.0,
        "description": "Historical documentaries, world history, ancient civilizations",
        "keywords": ["history", "world history", "ancient history", "historical facts", "documentary"],
        "aliases": ["historical content", "history lessons", "past events"],
    },
    {
        "id": "philosophy",
        "name": "Philosophy",
        "category": "education",
        "rpm": 12.0,
        "description": "Philosophy explained, stoicism, ethics, critical thinking",
        "keywords": ["philosophy", "stoicism", "ethics", "critical thinking", "philosophical concepts"],
        "aliases": ["philosophical", "philosophy lessons", "thinking"],
    },
    {
        "id": "study-tips",
        "name": "Study Tips",
        "category": "education",
        "rpm": 12.0,
        "description": "Study techniques, exam preparation, learning methods",
        "keywords": ["study tips", "study methods", "exam prep", "learning techniques", "study habits"],
        "aliases": ["studying", "study techniques", "exam preparation"],
    },

    # ── ADDITIONAL POPULAR NICHES ──
    {
        "id": "astrology",
        "name": "Astrology",
        "category": "lifestyle",
        "rpm": 6.0,
        "description": "Astrology readings, zodiac signs, horoscopes",
        "keywords": ["astrology", "zodiac", "horoscope", "tarot", "spirituality", "zodiac signs"],
        "aliases": ["zodiac signs", "horoscopes", "spiritual"],
    },
    {
        "id": "home-decor",
        "name": "Home Decor",
        "category": "lifestyle",
        "rpm": 6.0,
        "description": "Interior design, home decoration, DIY home projects",
        "keywords": ["home decor", "interior design", "home design", "decorating", "home improvement"],
        "aliases": ["interior decorating", "home decoration", "house design"],
    },
    {
        "id": "skincare",
        "name": "Skincare",
        "category": "lifestyle",
        "rpm": 6.0,
        "description": "Skincare routines, anti-aging, acne treatment",
        "keywords": ["skincare", "skin care", "anti aging", "acne", "skincare routine", "skincare tips"],
        "aliases": ["skin care", "facial care", "skincare advice"],
    },
    {
        "id": "pottery",
        "name": "Pottery",
        "category": "creative",
        "rpm": 5.0,
        "description": "Pottery making, ceramics, clay work",
        "keywords": ["pottery", "ceramics", "clay", "pottery wheel", "ceramic art"],
        "aliases": ["ceramic making", "clay work", "pottery art"],
    },
    {
        "id": "origami",
        "name": "Origami",
        "category": "creative",
        "rpm": 5.0,
        "description": "Paper folding, origami tutorials, paper crafts",
        "keywords": ["origami", "paper folding", "paper crafts", "origami tutorial"],
        "aliases": ["paper art", "paper folding art", "japanese paper folding"],
    },
    {
        "id": "blacksmithing",
        "name": "Blacksmithing",
        "category": "creative",
        "rpm": 5.0,
        "description": "Metalworking, forging, traditional crafts",
        "keywords": ["blacksmithing", "forging", "metalwork", "blacksmith", "anvil", "hammer"],
        "aliases": ["metalworking", "forge work", "metal crafting"],
    },

    # ── PARENT CATEGORY GENERAL NICHES ──
    {
        "id": "finance-general",
        "name": "Finance & Investment",
        "category": "finance",
        "rpm": 22.0,
        "description": "General finance content, personal finance, investing, crypto, wealth building",
        "keywords": ["finance", "finance and investment", "financial", "money", "investing general"],
        "aliases": ["finance category", "financial content", "money content"],
    },
    {
        "id": "business-general",
        "name": "Business & Entrepreneurship",
        "category": "business",
        "rpm": 18.0,
        "description": "General business content, make money online, digital marketing, startups",
        "keywords": ["business", "business and entrepreneurship", "entrepreneurship", "business general"],
        "aliases": ["business category", "entrepreneur content", "business content"],
    },
    {
        "id": "tech-general",
        "name": "Technology & Software",
        "category": "tech",
        "rpm": 15.0,
        "description": "General technology content, programming, AI, software reviews, tech tutorials",
        "keywords": ["technology", "technology and software", "tech", "software", "tech general"],
        "aliases": ["technology category", "tech content", "software content"],
    },
    {
        "id": "education-general",
        "name": "Education & Learning",
        "category": "education",
        "rpm": 12.0,
        "description": "General educational content, online courses, tutorials, skill development",
        "keywords": ["education", "education and learning", "learning", "educational", "education general"],
        "aliases": ["education category", "learning content", "educational content"],
    },
    {
        "id": "health-general",
        "name": "Health & Wellness",
        "category": "health",
        "rpm": 10.0,
        "description": "General health content, fitness, nutrition, mental health, medical advice",
        "keywords": ["health", "health and wellness", "wellness", "health general"],
        "aliases": ["health category", "wellness content", "health content"],
    },
    {
        "id": "science-general",
        "name": "Science & Research",
        "category": "science",
        "rpm": 9.0,
        "description": "General science content, scientific research, experiments",
        "keywords": ["science", "science and research", "scientific", "science general"],
        "aliases": ["science category", "scientific content", "research content"],
    },
    {
        "id": "automotive-general",
        "name": "Automotive & Transportation",
        "category": "automotive",
        "rpm": 8.0,
        "description": "General automotive content, car reviews, automotive repair, transportation",
        "keywords": ["automotive", "automotive and transportation", "cars general", "automotive general"],
        "aliases": ["automotive category", "car content", "auto content"],
    },
    {
        "id": "travel-general",
        "name": "Travel & Adventure",
        "category": "travel",
        "rpm": 7.0,
        "description": "General travel content, travel vlogs, destinations, adventure content",
        "keywords": ["travel", "travel and adventure", "adventure", "travel general"],
        "aliases": ["travel category", "adventure content", "travel content"],
    },
    {
        "id": "lifestyle-general",
        "name": "Lifestyle & Personal",
        "category": "lifestyle",
        "rpm": 6.0,
        "description": "General lifestyle content, personal development, relationships, daily life",
        "keywords": ["lifestyle", "lifestyle and personal", "personal", "lifestyle general"],
        "aliases": ["lifestyle category", "personal content", "lifestyle content"],
    },
    {
        "id": "sports-general",
        "name": "Sports & Fitness",
        "category": "sports",
        "rpm": 5.5,
        "description": "General sports content, athletics, fitness routines",
        "keywords": ["sports", "sports and fitness", "athletics", "sports general"],
        "aliases": ["sports category", "athletic content", "sports content"],
    },
    {
        "id": "creative-general",
        "name": "Creative & Arts",
        "category": "creative",
        "rpm": 5.0,
        "description": "General creative content, art, design, music production, photography",
        "keywords": ["creative", "creative and arts", "arts", "creative general"],
        "aliases": ["creative category", "art content", "creative content"],
    },
    {
        "id": "gaming-general",
        "name": "Gaming & Esports",
        "category": "gaming",
        "rpm": 4.0,
        "description": "General gaming content, video games, streaming, esports, game reviews",
        "keywords": ["gaming", "gaming and esports", "esports", "games", "gaming general"],
        "aliases": ["gaming category", "game content", "esports content"],
    },
    {
        "id": "entertainment-general",
        "name": "Entertainment & Comedy",
        "category": "entertainment",
        "rpm": 3.5,
        "description": "General entertainment content, movies, TV, comedy, celebrities, pop culture",
        "keywords": ["entertainment", "entertainment and comedy", "comedy general", "entertainment general"],
        "aliases": ["entertainment category", "comedy content", "entertainment content"],
    },
    {
        "id": "food-general",
        "name": "Food & Cooking",
        "category": "food",
        "rpm": 3.0,
        "description": "General food content, recipes, cooking tutorials, food reviews",
        "keywords": ["food", "food and cooking", "cooking general", "food general"],
        "aliases": ["food category", "cooking content", "food content"],
    },

    # ── GENERAL CONTENT ──
    {
        "id": "general",
        "name": "General Content",
        "category": "general",
        "rpm": 4.0,
        "description": "Mixed content, vlogging, general topics",
        "keywords": ["general", "vlog", "misc", "other", "mixed content", "daily life", "personal"],
        "aliases": ["misc", "other", "mixed", "vlogging", "lifestyle vlog"],
    },
]
