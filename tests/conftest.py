"""Shared fixtures for review_analyzer tests."""

import pytest

from review_analyzer.core.models import (
    AnnotationBundle, Label, PersonAttribute, PersonDetection, Shot,
)


FULL_CRITIQUE = """Here is my analysis of the video review.

**1. Clarity (7/10)**
Good Points:
- The reviewer names the product in the first sentence
- Speech is easy to follow

Improvement Points:
- Key claims are rushed at the end

Overall Assessment: A clear review with a rushed ending.

**2. Engagement (6/10)**
Good Points:
- Enthusiastic delivery
Improvement Points:
- Long static shots
- No direct address to the viewer
Overall Assessment: Moderately engaging.

### 3. Relevance (8/10)
Good Points:
- Stays on the product throughout
Improvement Points:
- Brief tangent about shipping
Overall Assessment: Highly relevant.

4. **Informative Content** (5/10)
Good Points:
- Mentions battery life
Improvement Points:
- No comparison with alternatives
Overall Assessment: Thin on detail.

5. **Visuals and Audio Quality (9/10)**
Good Points:
- Sharp, well-lit footage
Improvement Points:
- Slight background hum
Overall Assessment: Professional production.

**6. Presentation (4/10)**
Good Points:
- Logical order
Improvement Points:
- Ends abruptly
Overall Assessment: Needs a proper conclusion.
"""


class MockAIClient:
    """Deterministic mock for AIClient.generate()."""

    def __init__(self, response=FULL_CRITIQUE):
        self.calls = []
        self.response = response

    def generate(self, system_prompt, user_prompt, max_tokens=4096):
        self.calls.append((system_prompt, user_prompt))
        return self.response


def make_shots(count):
    return [Shot(start=float(i * 4), end=float(i * 4 + 4)) for i in range(count)]


@pytest.fixture
def critique_text():
    return FULL_CRITIQUE


@pytest.fixture
def rich_bundle():
    """Annotations that earn every available point."""
    return AnnotationBundle(
        transcript=(
            "Today I am reviewing this blender and as you can see it is well built. "
            "Take a look at the blades, notice how they crush ice. The product quality "
            "and the overall experience are excellent and I recommend it."
        ),
        shots=make_shots(12),
        labels=[Label(description=d, category="appliance") for d in
                ["blender", "kitchen", "countertop", "fruit", "ice", "glass"]],
        text_detections=["BlendPro 3000", "Check this out"],
        persons=[PersonDetection(attributes=[
            PersonAttribute(name="gesture", value="pointing", confidence=0.92),
        ])],
    )
