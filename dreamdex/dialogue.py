"""The professor's dialogue.

Pages of one line are separated by ``|``; ``@`` is the game font's accented
e.  Lines that are never shown are empty.
"""

from __future__ import annotations

from dreamdex.script_ids import Dia

_DIALOGUE = {
    Dia.OPEN: (
        "Hey there! I'm Professor\nFennel. As you can see, I'm\na scientist.|"
        "In fact, the subject I'm \nresearching is Trainers!|"
        "My dream is to collect save files of various trainers, \n"
        "but I haven't had any \nbreakthroughs yet...|"
        "So in the meantime, I've\nbeen working on a different\n"
        "project with one of my old\nfriends!|"
        "In my home region, there's a\nlocation that can make a\n"
        "Pok@mon's dreams into\nreality.|"
        "This means that any other\nPok@mon they meet in their\n"
        "dreams become real!|"
        "That's fantastic, but my\ngoal is to do the same-\n"
        "just with a trainer's dream\ninstead!|"
        "That's why I need your help!\nI want to bring as many\n"
        "Pok@mon out of your dreams\nas possible!|"
        "There's just over 250\nPok@mon I want to catalogue\n"
        "in my Dream Pok@Dex-\nor Dream Dex for short.|"
        "But I'll let you keep any\nPok@mon- they're from your\n"
        "dreams after all!|"
        "One last note, save data\nbackups are recommended-\n"
        "just on the off chance that\nsomething goes wrong!|"
        "I think that's everything...\nwhenever you're ready to\n"
        "start, just let me know!"
    ),
    Dia.E4: (
        "Hi trainer! I'm thrilled\nyou've decided to help with our research, "
        "but we need\nthe best of the best!|"
        "Come back after you've\nbeaten the Elite Four and\nbecome the Champion!"
    ),
    Dia.MG_FRLGE: (
        "Sorry trainer, one more\nthing to take care of before\n"
        "we can begin- you need to\nenable MYSTERY GIFT!|"
        "Head to the nearest Pok@\nMart and fill out the\n"
        "questionnaire as follows:\nLINK TOGETHER WITH ALL|"
        "After that, you should be\nall set to go!|"
        "See you soon!"
    ),
    Dia.MG_RS: (
        "Sorry trainer, one more\nthing to take care of before\n"
        "we can begin- you need to\nenable MYSTERY EVENT!|"
        "Head to the PETALBURG\nPok@mon Center and tell the\n"
        "man next to the PC:\nMYSTERY EVENT IS EXCITING|"
        "After that, you should be\nall set to go!|"
        "See you soon!"
    ),
    Dia.LETS_START: (
        "Perfect, that's all the\ninformation I need! Let's\nget started!"
    ),
    Dia.START: (
        "On a second Game Boy family\nsystem, please load the Game\n"
        "Boy Pok@mon game you wish to\ntransfer from.|"
        "In your Game Boy Pok@mon\ngame, make your current box\n"
        "the one you want to transfer\nfrom.|"
        "Then connect this Game Boy\nAdvance to the other Game\n"
        "Boy family system using a\nGame Boy Color link cable.|"
        "Once you're ready, press A\non this device, talk to the "
        "Cable Club attendant, and\nthen initiate a trade."
    ),
    Dia.TRANS_GOOD: "Amazing! Fantastic!\nEverything went perfectly!",
    Dia.NEW_DEX: (
        "It looks like there's at\nleast one new Pok@mon here\n"
        "that isn't in the Dream Dex!|"
        "I'll give them something\nextra sweet as a reward for you both."
    ),
    Dia.NO_NEW_DEX: (
        "It doesn't look like there's\nanything new for your Dream\n"
        "Dex, but that's okay!|"
        "It's important to confirm\nresearch results with\nmultiple tests!"
    ),
    Dia.SEND_FRIEND_KANTO: (
        "I'm going to send these\nPok@mon to one of my friends\n"
        "so that you can pick them\nup!|"
        "They live just south of the Pok@mon center on Seven\nIsland!"
    ),
    Dia.SEND_FRIEND_HOENN_RS: (
        "I'm going to send these\nPok@mon to one of my friends\n"
        "so that you can pick them\nup!|"
        "They live just southeast of the Pok@mon center in\nMossdeep City!"
    ),
    Dia.SEND_FRIEND_HOENN_E: (
        "I'm going to send these\nPok@mon to one of my friends\n"
        "so that you can pick them\nup!|"
        "They live just southeast of the Pok@mon center in\nSootopolis City!"
    ),
    Dia.THANK: (
        "Thank you so much for your\nhelp! Whenever you want to\n"
        "transfer more Pok@mon, just\nlet me know!|"
        "See you around!"
    ),
    Dia.GET_MON: (
        "Let's get started! Please connect Load the Game Boy Pok@mon game "
        "you want to transfer from, and put the Pok@mon you want to "
        "transfer into your party. "
    ),
    Dia.MG_OTHER_EVENT: (
        "Hi Trainer! It looks like\nyou have a different event\n"
        "currently loaded.|"
        "That's no problem, but it\nwill be overwritten if you\ncontinue.|"
        "Turn off the system now if\nyou want to experience your\n"
        "current event,\nbut otherwise-"
    ),
    Dia.PKMN_TO_COLLECT: (
        "Hi Trainer! It looks like\nyou still have Pok@mon to\npick up...|"
        "I can't send over new\nPok@mon until you pick those\nup.|"
        "Come back after you've\nreceived them!"
    ),
    Dia.NO_VALID_PKMN: (
        "Sorry Trainer, it doesn't\nlook like you have any valid\n"
        "Pok@mon in your current box\nright now.|"
        "Go double check your current\nbox and we can give it\n"
        "another shot!"
    ),
    Dia.ASK_QUEST: (
        "Hi trainer! Before we begin,\nI need to ask you a few\nquestions."
    ),
    Dia.WHAT_GAME_TRANS: (
        "And which Game Boy Pok@mon\ngame are you transferring\nfrom?"
    ),
    Dia.WHAT_LANG_TRANS: (
        "What language is the Game\nBoy Pok@mon game that you're\n"
        "transferring from?"
    ),
    Dia.NO_GB_ROM: (
        "I'm sorry, but that version\nin that language is not\n"
        "currently supported."
    ),
    Dia.IN_BOX: (
        "Alright! Let's take a look\nat the Pok@mon that will be\n"
        "transfered.|"
        "Please remember, once a\nPok@mon is transfered, it\n"
        "CANNOT be returned to the\nGame Boy Game Pak.|"
        "Select confirm once you're\nready, or select cancel if\n"
        "you want to keep the Pok@mon\non your Game Boy Game Pak."
    ),
    Dia.MYTHIC_CONVERT: (
        "It looks like you have a\nrare Mythical Pok@mon!|"
        "Due to their rarity, it\nseems they've overloaded the\nmachine.|"
        "I can stablize them if you'd\nlike, but it'll change some\n"
        "things like met location,\nOT, TID, and Shininess.|"
        "Otherwise I can leave them\nas is, but there's no\n"
        "guarentee that they'll be\ntransferrable in the future.|"
        "Do you want me to stablize\nthem? This will apply to\n"
        "all of the Mythical Pok@mon\ncurrently in your box."
    ),
    Dia.CANCEL: (
        "No worries! Feel free to\ncome back if you change your\nmind!|"
        "See you around!"
    ),
    Dia.SOME_INVALID_PKMN: (
        "I see there is at least one\nPok@mon that cannot be\n"
        "transferred from your\ncurrent box.|"
        "Pok@mon holding items or\nmodified incorrectly through\n"
        "unintended means cannot\nbe transferred.|"
        "The other Pok@mon will\ntransfer just fine though!"
    ),
    Dia.MENU_BACK: "No worries! Feel free to\ncome back any time!",
    Dia.IS_MISSINGNO: (
        "...It seems like one of your Pok@mon is messing with the machine...|"
        "It looks to only be graphical though, so we can continue!"
    ),
    Dia.ERROR_COLOSSEUM: (
        "It looks like you went to\nthe colosseum instead of the\n"
        "trading room!|"
        "Let's try that again!"
    ),
    Dia.ERROR_COM_ENDED: (
        "Communication with the other\ndevice was terminated.|"
        "Let's try that again!"
    ),
    Dia.ERROR_DISCONNECT: (
        "It looks like the Game Boy\nColor link cable was\n"
        "disconnected...|"
        "Let's try that again!"
    ),
    Dia.ERROR_TIME_ONE: (
        "It looks like the connection\ntimed out...|"
        "Let's try that again!"
    ),
    Dia.ERROR_TIME_TWO: (
        "It seems like the connection\ntimed out...|"
        "Let's try that again!"
    ),
    Dia.WHAT_LANG_EVENT: (
        "What language is the Game\nBoy Pok@mon game that you\n"
        "want to send an event to?"
    ),
    Dia.WHAT_GAME_EVENT: (
        "And which Game Boy Pok@mon\ngame do you want to send an event to?"
    ),
    Dia.K_DEX_NOT_FULL: (
        "Sorry trainer, it looks like\nyou haven't caught all 150\n"
        "Pok@mon from the Kanto\nregion yet.|"
        "Go out and catch them all\nand then we'll be able to\n"
        "send over the event!"
    ),
    Dia.J_DEX_NOT_FULL: (
        "Sorry trainer, it looks like\nyou haven't caught all 99\n"
        "new Pok@mon from the Johto\nregion yet.|"
        "Go out and catch them all\nand then we'll be able to\n"
        "send over the event!"
    ),
}


def build_dialogue() -> dict[Dia, str]:
    """Return a fresh table of every dialogue line, empty where none is written."""
    return {dia: _DIALOGUE.get(dia, "") for dia in Dia}