from django.db import models


class BidType(models.TextChoices):
    BUY = "BUY", "Покупка"
    SELL = "SELL", "Продажа"


class NDS(models.TextChoices):
    # Tax mode of quoted prices: VAT excluded / included
    EXCLUDED = "EXCLUDED", "Без НДС"
    INCLUDED = "INCLUDED", "С НДС"


class QualityClass(models.IntegerChoices):
    FIRST = 1, "1 класс"
    SECOND = 2, "2 класс"
    THIRD = 3, "3 класс"
    FOURTH = 4, "4 класс"
    FIFTH = 5, "5 класс"
    SIXTH = 6, "6 класс"
