from __future__ import annotations

from app.application.ports.ingredient_catalog import IngredientCatalogPort
from app.application.use_cases.check_compatibility import CompatibilityResult
from app.domain.entities.reply import Button, Reply, ReplyFormat


WELCOME_TEXT = """🧪 **VelGuru Formulation Assistant**

Welcome! I'm your AI-powered skincare formulation expert.

**What I can help you with:**
✨ Create custom skincare formulations
🔬 Check ingredient compatibility  
📊 Suggest optimal concentrations
🛡️ Assess safety profiles
💡 Recommend ingredients for specific concerns

**Available Commands:**
/formulate - Start creating a formulation
/ingredients - Browse ingredient database
/compatibility - Check ingredient compatibility
/help - Show this help message

Ready to create amazing skincare products? 🚀"""

HELP_TEXT = """🆘 **VelGuru Help Guide**

**Available Commands:**
• /start - Main menu and welcome
• /formulate - Create custom formulations
• /ingredients - Browse ingredient database  
• /compatibility - Check ingredient compatibility
• /help - Show this help message

**How to use:**
1. Start with /formulate to create a product
2. Select your product type
3. Get ingredient recommendations
4. Use /compatibility to check combinations
5. Build your perfect formulation!

**Features:**
✅ Product type guidance
✅ Ingredient compatibility checking
✅ Concentration recommendations  
✅ Safety assessments
✅ Professional formulation advice

Need help? Just type /start to begin! 🧪"""

COMPATIBILITY_PROMPT_TEXT = """🔬 **Ingredient Compatibility Checker**

Please enter the ingredients you want to check (one per line):

Example:
Retinol
Vitamin C
Niacinamide

Or use /start to go back to the main menu."""

FORMULATION_WIZARD_TEXT = "🧪 **Formulation Wizard**\n\nWhat type of product would you like to create?"

UNKNOWN_COMMAND_TEXT = "Unknown command. Use /help to see available commands."
USE_A_COMMAND_TEXT = "Please use one of the available commands:\n/start, /formulate, /ingredients, /compatibility, /help"
ERROR_FALLBACK_TEXT = "Sorry, an error occurred. Please try again with /start"

MAIN_MENU_BUTTONS = (
    (
        Button("🧪 Start Formulation", "start_formulation"),
        Button("📚 Browse Ingredients", "browse_ingredients"),
    ),
    (
        Button("🔬 Check Compatibility", "check_compatibility"),
        Button("❓ Help", "help"),
    ),
)

PRODUCT_TYPE_BUTTONS = (
    (
        Button("🧴 Cleanser", "product_cleanser"),
        Button("🧪 Serum", "product_serum"),
    ),
    (
        Button("🍯 Moisturizer", "product_moisturizer"),
        Button("🌞 Sunscreen", "product_sunscreen"),
    ),
    (
        Button("🎭 Face Mask", "product_mask"),
        Button("👁️ Eye Cream", "product_eye"),
    ),
)

PRODUCT_SUGGESTIONS: dict[str, tuple[str, ...]] = {
    "serum": ("Hyaluronic Acid (hydration)", "Niacinamide (pore control)", "Vitamin C (brightening)"),
    "moisturizer": ("Hyaluronic Acid", "Ceramides", "Peptides"),
    "cleanser": ("Gentle surfactants", "Niacinamide", "Salicylic Acid (for oily skin)"),
    "sunscreen": ("Zinc Oxide", "Titanium Dioxide", "Chemical UV filters"),
    "mask": ("Clay (for oily skin)", "Hyaluronic Acid (hydrating)", "AHA/BHA (exfoliating)"),
    "eye": ("Peptides", "Caffeine", "Gentle moisturizers"),
}
FALLBACK_SUGGESTIONS = ("Consult ingredient database for specific recommendations",)


def get_product_suggestions(product_type: str) -> tuple[str, ...]:
    return PRODUCT_SUGGESTIONS.get(product_type, FALLBACK_SUGGESTIONS)


class ReplyComposer:
    """Builds every outbound reply. Pure: no I/O and no session mutation."""

    def __init__(self, catalog: IngredientCatalogPort) -> None:
        self._catalog = catalog

    def welcome(self) -> Reply:
        return Reply(WELCOME_TEXT, ReplyFormat.MARKDOWN, MAIN_MENU_BUTTONS)

    def help(self) -> Reply:
        return Reply(HELP_TEXT, ReplyFormat.MARKDOWN)

    def formulation_wizard(self) -> Reply:
        return Reply(FORMULATION_WIZARD_TEXT, ReplyFormat.MARKDOWN, PRODUCT_TYPE_BUTTONS)

    def compatibility_prompt(self) -> Reply:
        return Reply(COMPATIBILITY_PROMPT_TEXT)

    def unknown_command(self) -> Reply:
        return Reply(UNKNOWN_COMMAND_TEXT)

    def use_a_command(self) -> Reply:
        return Reply(USE_A_COMMAND_TEXT)

    def error_fallback(self) -> Reply:
        return Reply(ERROR_FALLBACK_TEXT)

    def ingredients(self) -> Reply:
        text = "📚 **Available Ingredients Database:**\n\n"
        for record in self._catalog.all():
            text += f"**{record.name}**\n"
            text += f"• Category: {record.category}\n"
            text += f"• Max concentration: {_format_percent(record.max_concentration)}%\n"
            text += f"• Benefits: {', '.join(record.benefits)}\n\n"
        text += "Use /formulate to start creating a formulation with these ingredients!"
        return Reply(text, ReplyFormat.MARKDOWN)

    def product_suggestions(self, product_type: str) -> Reply:
        text = f"Great choice! You selected **{product_type}**.\n\n"
        text += f"**Recommended ingredients for {product_type}:**\n"
        for suggestion in get_product_suggestions(product_type):
            text += f"• {suggestion}\n"
        text += "\nUse /ingredients to see full database or /compatibility to check ingredient combinations!"
        return Reply(text, ReplyFormat.MARKDOWN)

    def compatibility_report(self, result: CompatibilityResult) -> Reply:
        blocks: list[str] = ["🔬 **Compatibility Analysis:**\n\n"]

        if not result.found:
            blocks.append("❌ No recognized ingredients found. Please check spelling.\n\n")
            blocks.append("Available ingredients: " + ", ".join(self._catalog.display_names()))
        else:
            blocks.append("✅ **Recognized Ingredients:**\n")
            blocks.extend(f"• {record.name}\n" for record in result.found)
            blocks.append("\n")

            if result.incompatibilities:
                blocks.append("⚠️ **Potential Incompatibilities:**\n")
                blocks.extend(f"• {pair.label}\n" for pair in result.incompatibilities)
                blocks.append(
                    "\n**Recommendation:** Use these ingredients at different times or in separate products.\n\n"
                )
            else:
                blocks.append("✅ **No major incompatibilities detected!**\n")
                blocks.append("These ingredients should work well together.\n\n")

            if result.not_found:
                blocks.append("❓ **Unrecognized ingredients:**\n")
                blocks.extend(f"• {token}\n" for token in result.not_found)

        blocks.append("\nUse /formulate to create a complete formulation!")
        return Reply("".join(blocks), ReplyFormat.MARKDOWN)


def _format_percent(value: float) -> str:
    # 1.0 -> "1", 2.5 -> "2.5"
    return f"{value:g}"
