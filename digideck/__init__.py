"""DigiDeck: search front-end for the Digimon creature and card lookup services."""
