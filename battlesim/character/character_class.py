from pydantic import BaseModel, Field

from battlesim.core.constants import BASE_EP, BASE_HP


class CharacterClass(BaseModel):
    """
    Represents a character class with its base statistics and the pool of
    abilities its members may equip.
    """

    name: str = Field(
        description="The name of the character class.",
    )
    description: str = Field(
        default="",
        description="A short description of the class play style.",
    )
    base_hp: int = Field(
        default=BASE_HP,
        gt=0,
        description="Maximum HP before race bonuses.",
    )
    base_ep: int = Field(
        default=BASE_EP,
        ge=0,
        description="Maximum EP before race bonuses.",
    )
    abilities: list[str] = Field(
        default_factory=list,
        description="Names of the abilities available to this class.",
    )

    def can_use(self, ability_name: str) -> bool:
        """
        Check whether an ability belongs to this class's pool.

        Args:
            ability_name (str): The name of the ability.

        Returns:
            bool: True if the ability is in the class pool.

        """
        return ability_name in self.abilities

    def __hash__(self) -> int:
        """
        Hash the character class based on its name.

        Returns:
            int:
                The hash value of the character class.

        """
        return hash(self.name)
