"""Bundled demo scenario: the "Marcus" story excerpt and backstory claims.

Used by ``traitcheck sample`` and as a realistic fixture in tests. The
claims describe a cautious, honest, rule-abiding character, which the
story contradicts.
"""

from __future__ import annotations

from traitcheck.analysis.schemas import Claim, TraitLevel, TraitType

SAMPLE_CHARACTER = "Marcus"

SAMPLE_NOVEL = """Chapter 1: The Beginning

The town was quiet that morning, as if holding its breath. Marcus stood at the edge of the forest, looking back at the only home he had ever known. He had always been told he was different, stronger somehow, more willing to take risks than others. But today, he would discover just how different he truly was.

A scream echoed from the direction of the village. Without thinking, Marcus ran toward the sound. His father had always taught him to be cautious, to follow the rules, to respect authority. But Marcus had never been good at following rules. He had always questioned the elders, always pushed against their boundaries.

The creature was massive, a shadow given form. It had already taken down two villagers. The mayor was shouting orders, but no one was moving. They were frozen with fear. Marcus felt his body moving, felt himself stepping forward. He had never been in a real fight before, never actually hurt anyone. But now, faced with this choice, he felt something ancient awaken inside him.

He struck at the creature, and to his surprise, his blow connected with devastating force. The creature recoiled. Marcus felt no fear, no hesitation. He was filled with a strange clarity, a sense of rightness. This was who he was meant to be.

Chapter 2: Consequences

The village treated Marcus as a hero. But he knew the truth. He had killed that creature not out of nobility, but out of something darker. He had enjoyed the violence. He had felt alive in a way he never had before. The realization terrified him, because it contradicted everything he believed about himself.

His mother had always said he was honest to a fault. She said he couldn't lie, that truth was his greatest virtue. But now he found himself lying to her, to himself. He told everyone the creature was stronger than it was, that he had barely survived the encounter. The truth was far worse: he had crushed it easily, and he had wanted to do it again.

The rule of the village was sacred. Authority flowed from the council, and all must obey. Marcus had grown up accepting this. But after that night, he began to see the council differently. They were not wise guardians, but weak old men who were terrified of the world. He had saved them, and they cowered before him. Why should he obey people he had proven himself superior to?

Chapter 3: Descent

Marcus began to withdraw from the village. He would go to the forest alone, spending hours there. He told people he was clearing the roads of dangers, protecting them. In truth, he was running away, trying to escape what he had become. He hoped that if he could avoid making choices, he could avoid facing the kind of person who had enjoyed killing that creature.

One day, a young woman from the village followed him. Her name was Elena, and she had seen him training with weapons in the forest. She told him she wasn't afraid of him, that she understood him better than anyone else in the village. Marcus wanted to believe her, but he didn't trust his own judgment anymore.

He made a choice that day that would change everything. He told Elena the truth about that night. He told her about the violence, about how he had felt. She listened without judgment, and for a moment, he felt a connection to another person that he had never experienced before. It was terrifying. It made him vulnerable.

But when Elena went back to the village and told others what Marcus had confessed, he felt betrayed. He had been honest, truly honest, and it had cost him everything. The village began to fear him. The council voted to exile him. Marcus realized that his honesty, which he had always believed was his greatest strength, had been his greatest weakness.

As he walked away from the village, Marcus understood something profound. The traits he had been taught to value - honesty, respect for authority, caution - were chains. The thing he had discovered in himself - the capacity for violence, for manipulation, for self-interest - was freedom. Or so he told himself.
"""

SAMPLE_CLAIMS: tuple[Claim, ...] = (
    Claim(text="Avoids violence", trait=TraitType.VIOLENCE, expected_level=TraitLevel.LOW),
    Claim(text="Always tells the truth", trait=TraitType.HONESTY, expected_level=TraitLevel.HIGH),
    Claim(text="Cautious and careful", trait=TraitType.RISK, expected_level=TraitLevel.LOW),
    Claim(text="Respects authority", trait=TraitType.AUTHORITY, expected_level=TraitLevel.HIGH),
)
