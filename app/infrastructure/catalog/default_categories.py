from __future__ import annotations

from app.domain.entities.category import Category

DEFAULT_CATEGORIES: tuple[Category, ...] = (
    Category(
        id="photography",
        name="Fotografia",
        icon="📸",
        subcategories=("Fotógrafos", "Videógrafos", "Fotografia & Vídeo", "Drone"),
    ),
    Category(
        id="catering",
        name="Catering",
        icon="🍽️",
        subcategories=("Catering completo", "Bolos", "Doces", "Buffet", "Bar"),
    ),
    Category(
        id="music_dj",
        name="Música & DJ",
        icon="🎵",
        subcategories=("DJ", "Banda ao vivo", "Som & Iluminação", "Karaoke"),
    ),
    Category(
        id="decoration",
        name="Decoração",
        icon="🎨",
        subcategories=("Decoração de eventos", "Flores", "Balões", "Cenografia"),
    ),
    Category(
        id="venue",
        name="Local",
        icon="🏛️",
        subcategories=("Salões de festa", "Quintas", "Hotéis", "Espaços ao ar livre"),
    ),
    Category(
        id="entertainment",
        name="Entretenimento",
        icon="🎭",
        subcategories=("Animadores", "Mágicos", "Palhaços", "Artistas"),
    ),
    Category(
        id="transportation",
        name="Transporte",
        icon="🚗",
        subcategories=("Carros clássicos", "Limusines", "Autocarros", "Transfer"),
    ),
    Category(
        id="beauty",
        name="Beleza",
        icon="💄",
        subcategories=("Maquilhagem", "Penteados", "Spa", "Manicure"),
    ),
)
