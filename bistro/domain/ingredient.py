from pydantic import BaseModel


class Ingredient(BaseModel):
    """Ingrédient d'un plat ou ligne de stock d'un poste.

    - quantity : stock courant
    - required_quantity : consommation par préparation
    """

    name: str = "UNKNOWN"
    quantity: int = 0
    required_quantity: int = 0
    price: float = 0.0
