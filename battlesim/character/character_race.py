from pydantic import BaseModel, Field


class CharacterRace(BaseModel):
    """
    Represents a character's race, including the stat bonuses and the extra
    ability slots it grants.
    """

    name: str = Field(
        description="The name of the race",
    )
    description: str = Field(
        default="",
        description="A short flavour description of the race",
    )
    hp_bonus: int = Field(
        default=0,
        ge=0,
        description="Maximum HP added on top of the class base HP",
    )
    ep_bonus: int = Field(
        default=0,
        ge=0,
        description="Maximum EP added on top of the class base EP",
    )
    extra_ability_slots: int = Field(
        default=0,
        ge=0,
        description="Additional ability slots beyond the standard loadout",
    )

    def __hash__(self) -> int:
        """
        Hash the character race based on its name.

        Returns:
            int:
                The hash value of the character race.

        """
        return hash(self.name)
