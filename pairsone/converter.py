from pairsone.domain.game_rules import board_size
from pairsone.models.dc_models import GameListModel
from pairsone.models.schema_models import GameSchema


class DataConverter:
    """This class is used to convert data between different formats."""

    def convert_game_to_list_model(self, game: GameSchema) -> GameListModel:
        """Convert the GameSchema to the summary shown in the lobby list

        Args:
            game (GameSchema): The stored game

        Returns:
            GameListModel: id, theme, "NxN" size and one {"name": online} entry per slot
        """
        size = board_size(len(game.cards))
        return GameListModel(
            id=game.id,
            theme=game.theme,
            size=f"{size}x{size}",
            players=[{"name": player.online} for player in game.players],
        )
