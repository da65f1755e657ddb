"""
Static paragraph data: CEFR level descriptions for prompts and fallback
texts served when generation fails.

FALLBACK_PARAGRAPHS[level]["default"] must exist for every level in
PARAGRAPH_LEVELS. Topic keys are lowercase.
"""

PARAGRAPHS_DATA_VERSION = 1

PARAGRAPH_LEVELS = ("A2", "B1", "B2", "C1")

LEVEL_DESCRIPTIONS = {
    "A2": "basic/elementary level - can understand sentences and frequently used expressions related to areas of most immediate relevance in German",
    "B1": "intermediate level - can deal with most situations likely to arise while traveling in a German-speaking area",
    "B2": "upper intermediate level - can interact with a degree of fluency and spontaneity that makes regular interaction with native German speakers quite possible",
    "C1": "advanced level - can express ideas fluently and spontaneously in German without much obvious searching for expressions",
}

DEFAULT_LEVEL_DESCRIPTION = "intermediate level"

FALLBACK_PARAGRAPHS = {
    "A2": {
        "default": (
            "Ich heiße Anna und ich wohne in Berlin. Jeden Morgen trinke ich einen Kaffee "
            "und esse ein Brot mit Käse. Dann fahre ich mit dem Fahrrad zur Arbeit. "
            "Am Wochenende treffe ich meine Freunde. Wir gehen oft in den Park oder ins Kino. "
            "Im Sommer ist das Wetter schön und wir essen draußen ein Eis."
        ),
        "familie": (
            "Meine Familie ist nicht sehr groß. Ich habe einen Bruder und eine Schwester. "
            "Mein Vater arbeitet in einer Bank und meine Mutter ist Lehrerin. "
            "Am Sonntag besuchen wir oft unsere Großeltern. Meine Großmutter kocht dann "
            "immer eine leckere Suppe und wir spielen zusammen Karten."
        ),
        "essen": (
            "Zum Frühstück esse ich gern Brötchen mit Marmelade. Mittags gehe ich in die Kantine. "
            "Dort gibt es jeden Tag Suppe, Salat und ein warmes Essen. Am Abend koche ich "
            "zu Hause. Ich mag Nudeln mit Tomatensoße am liebsten."
        ),
    },
    "B1": {
        "default": (
            "Letztes Jahr habe ich eine Reise nach München gemacht. Die Stadt hat mir sehr gut "
            "gefallen, weil es dort viele Museen und schöne Parks gibt. Besonders interessant "
            "fand ich den Viktualienmarkt, wo man frisches Obst und regionale Spezialitäten "
            "kaufen kann. Obwohl das Wetter nicht immer gut war, hatte ich eine tolle Zeit. "
            "Nächstes Mal möchte ich auch die Berge in der Nähe besuchen."
        ),
        "reisen": (
            "Wenn ich mit dem Zug durch Deutschland reise, nehme ich immer ein gutes Buch mit. "
            "Die Fahrt von Hamburg nach Köln dauert ungefähr vier Stunden. Manchmal hat der Zug "
            "Verspätung, aber das stört mich nicht, weil ich die Landschaft gern beobachte. "
            "In Köln besuche ich jedes Mal den Dom, der wirklich beeindruckend ist."
        ),
        "arbeit": (
            "Seit zwei Jahren arbeite ich in einem kleinen Unternehmen in Stuttgart. Meine Kollegen "
            "sind freundlich und wir helfen uns gegenseitig. Morgens haben wir oft eine kurze "
            "Besprechung, in der wir die Aufgaben für den Tag planen. Obwohl die Arbeit manchmal "
            "stressig ist, macht sie mir viel Spaß."
        ),
    },
    "B2": {
        "default": (
            "Die Digitalisierung hat unseren Alltag in den letzten Jahren grundlegend verändert. "
            "Während früher Briefe geschrieben wurden, kommunizieren heute die meisten Menschen "
            "über Nachrichten-Apps. Das hat zweifellos Vorteile, denn Informationen verbreiten "
            "sich schneller als je zuvor. Allerdings klagen viele darüber, dass sie ständig "
            "erreichbar sein müssen. Es stellt sich daher die Frage, wie man einen gesunden "
            "Umgang mit digitalen Medien finden kann."
        ),
        "natur": (
            "Der Schutz der Umwelt spielt in Deutschland eine immer größere Rolle. Viele Städte "
            "investieren in Radwege und öffentliche Verkehrsmittel, um den Autoverkehr zu "
            "reduzieren. Außerdem wird Müll sorgfältig getrennt, damit möglichst viel recycelt "
            "werden kann. Trotzdem gibt es Kritiker, die meinen, dass diese Maßnahmen nicht "
            "ausreichen, um den Klimawandel wirksam zu bekämpfen."
        ),
    },
    "C1": {
        "default": (
            "Die Frage, inwieweit Sprache unser Denken prägt, beschäftigt Wissenschaftler seit "
            "Jahrhunderten. Einerseits lässt sich beobachten, dass Sprecher unterschiedlicher "
            "Sprachen bestimmte Sachverhalte auf verschiedene Weise wahrnehmen; andererseits "
            "wäre es voreilig, daraus zu schließen, dass Sprache das Denken vollständig "
            "bestimmt. Vielmehr scheint ein wechselseitiges Verhältnis zu bestehen, in dem "
            "kulturelle Erfahrungen und sprachliche Strukturen einander beeinflussen."
        ),
        "geschichte": (
            "Der Fall der Berliner Mauer im November 1989 gilt als einer der bedeutendsten "
            "Wendepunkte der europäischen Nachkriegsgeschichte. Was als friedliche Protestbewegung "
            "begann, mündete binnen weniger Monate in die Wiedervereinigung zweier Staaten, die "
            "sich über Jahrzehnte hinweg auseinanderentwickelt hatten. Die gesellschaftlichen "
            "Folgen dieses Prozesses sind bis heute spürbar und werden kontrovers diskutiert."
        ),
    },
}
