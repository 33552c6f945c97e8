"""Built-in fish species data used to pick and describe results.

Loaded once at import and exposed read-only, so every ResultSelector shares
the same tables.
"""

from types import MappingProxyType

# Insertion order decides which entry wins a substring match
FISH_DESCRIPTIONS: MappingProxyType[str, str] = MappingProxyType(
    {
        "鲤鱼": "鲤鱼是一种常见的淡水鱼，适应性强，生长迅速。",
        "草鱼": "草鱼以水草为食，生长速度快，是重要的养殖鱼类。",
        "鲈鱼": "鲈鱼是优质的海水鱼类，肉质鲜美，经济价值高。",
        "罗非鱼": "罗非鱼生长快，适应性强，是重要的热带养殖鱼类。",
        "鲫鱼": "鲫鱼体型较小，适应能力强，分布广泛。",
        "金鱼": "金鱼是观赏鱼类，常见于水族馆和家庭鱼缸。",
        "鲑鱼": "鲑鱼是洄游性鱼类，肉质鲜美富含Omega-3。",
        "鲶鱼": "鲶鱼是无鳞鱼，喜欢栖息在底层水域，杂食性。",
        "鳟鱼": "鳟鱼是冷水性鱼类，肉质细嫩，适合多种烹饪方式。",
        "石斑鱼": "石斑鱼是高档海水鱼，肉质鲜美，经济价值高。",
    }
)

# "鱼" (fish) also matches species outside the description table
GENERIC_FISH_KEYWORD = "鱼"

FISH_KEYWORDS: tuple[str, ...] = (*FISH_DESCRIPTIONS, GENERIC_FISH_KEYWORD)

DEFAULT_DESCRIPTION = "暂无详细描述信息。"
