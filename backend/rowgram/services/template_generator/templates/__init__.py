from rowgram.services.template_generator.templates.championship_gold import ChampionshipGoldTemplate
from rowgram.services.template_generator.templates.classic_lineup import ClassicLineupTemplate
from rowgram.services.template_generator.templates.configurable import ConfigurableTemplate
from rowgram.services.template_generator.templates.elite_performance import ElitePerformanceTemplate
from rowgram.services.template_generator.templates.henley_poster import HenleyPosterTemplate
from rowgram.services.template_generator.templates.minimal_clean import MinimalCleanTemplate
from rowgram.services.template_generator.templates.modern_card import ModernCardTemplate
from rowgram.services.template_generator.templates.oxbridge_herald import OxbridgeHeraldTemplate
from rowgram.services.template_generator.templates.race_day import RaceDayTemplate
from rowgram.services.template_generator.templates.regatta_royal import RegattaRoyalTemplate
from rowgram.services.template_generator.templates.vintage_classic import VintageClassicTemplate

__all__ = [
    "ChampionshipGoldTemplate",
    "ClassicLineupTemplate",
    "ConfigurableTemplate",
    "ElitePerformanceTemplate",
    "HenleyPosterTemplate",
    "MinimalCleanTemplate",
    "ModernCardTemplate",
    "OxbridgeHeraldTemplate",
    "RaceDayTemplate",
    "RegattaRoyalTemplate",
    "VintageClassicTemplate",
]
